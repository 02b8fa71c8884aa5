from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory fixtures used by renderer, coordinator and CLI tests.
3. A logging reset for tests that configure the root logger.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small project tree mixing case, hidden entries and nesting.

    Structure:
    /proj
      /A
        /inner
          deep.txt
        .secret
      /b
        x.txt
      /.git
        config
      z.txt
      a.txt
      .hidden_file
    """
    root = tmp_path / "proj"
    root.mkdir()

    a_dir = root / "A"
    a_dir.mkdir()
    (a_dir / "inner").mkdir()
    (a_dir / "inner" / "deep.txt").write_text("deep", encoding="utf-8")
    (a_dir / ".secret").write_text("s", encoding="utf-8")

    b_dir = root / "b"
    b_dir.mkdir()
    (b_dir / "x.txt").write_text("x", encoding="utf-8")

    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_text("[core]", encoding="utf-8")

    (root / "z.txt").write_text("z", encoding="utf-8")
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / ".hidden_file").write_text("h", encoding="utf-8")

    return root


@pytest.fixture
def expected_visible() -> str:
    """Rendering of sample_tree with hidden entries excluded."""
    return "\n".join([
        "proj",
        "├── A",
        "│   └── inner",
        "│       └── deep.txt",
        "├── b",
        "│   └── x.txt",
        "├── a.txt",
        "└── z.txt",
    ]) + "\n"


@pytest.fixture
def expected_with_hidden() -> str:
    """Rendering of sample_tree with hidden entries included."""
    return "\n".join([
        "proj",
        "├── .git",
        "│   └── config",
        "├── A",
        "│   ├── inner",
        "│   │   └── deep.txt",
        "│   └── .secret",
        "├── b",
        "│   └── x.txt",
        "├── .hidden_file",
        "├── a.txt",
        "└── z.txt",
    ]) + "\n"


# -----------------------------------------------------------------------------
# Logging Isolation
# -----------------------------------------------------------------------------
def _reset_root_logging() -> None:
    from treeprinter.infra.logging.core import (
        _CONFIGURED_FLAG_ATTR,
        _QUEUE_LISTENER_ATTR,
        _safe_stop_listener,
    )

    root = logging.getLogger()
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        for h in list(root.handlers):
            if getattr(h, "queue", None) is listener.queue:
                root.removeHandler(h)

    setattr(root, _QUEUE_LISTENER_ATTR, None)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


@pytest.fixture
def reset_logging():
    """Undo configure_logging() so each test starts from a clean root logger."""
    _reset_root_logging()
    yield
    _reset_root_logging()

from __future__ import annotations

"""
Tree Renderer.

Walks a directory recursively and emits one visual line per entry using
Unicode connectors (├──, └──) and depth-correct indentation. Each call reads
the directory afresh; no intermediate tree is kept in memory.
"""

import logging
import os
from typing import List

from treeprinter.domain import constants as const
from treeprinter.domain.tree_models import (
    DirectoryEntry,
    Lineage,
    RenderTarget,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: str, target: RenderTarget, show_hidden: bool = False) -> int:
    """
    Emit the root's base name followed by its full tree.

    Args:
        root: Validated root directory.
        target: Destination for the rendered lines.
        show_hidden: Include entries starting with the hidden marker.

    Returns:
        int: Number of lines emitted, root line included.
    """
    target.write_line(root_display_name(root))
    return 1 + render_directory(root, target, (), show_hidden)


def render_directory(
        directory: str,
        target: RenderTarget,
        lineage: Lineage = (),
        show_hidden: bool = False,
) -> int:
    """
    Recursively render the contents of a directory in depth-first pre-order.

    Directories that cannot be listed render as empty so one inaccessible
    branch never aborts the rest of the tree.

    Args:
        directory: Directory whose children are rendered.
        target: Destination for the rendered lines.
        lineage: Was-last flags of every ancestor, outermost first.
        show_hidden: Include entries starting with the hidden marker.

    Returns:
        int: Number of lines emitted for this subtree.
    """
    entries = list_entries(directory, show_hidden)
    total = len(entries)
    emitted = 0

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        target.write_line(format_line(entry.name, lineage, is_last))
        emitted += 1

        if entry.is_dir:
            emitted += render_directory(
                entry.path, target, lineage + (is_last,), show_hidden
            )

    return emitted


def list_entries(directory: str, show_hidden: bool = False) -> List[DirectoryEntry]:
    """
    List, filter and order the immediate children of a directory.

    Directories come first, then files, each group sorted by name
    case-insensitively.

    Args:
        directory: Directory to list.
        show_hidden: Keep entries starting with the hidden marker.

    Returns:
        List[DirectoryEntry]: Emission order for this level. Empty when the
        directory cannot be listed.
    """
    try:
        with os.scandir(directory) as it:
            raw = [_to_entry(de) for de in it]
    except OSError as e:
        logger.debug(f"Skipping unreadable directory '{directory}': {e}")
        return []

    if not show_hidden:
        raw = [e for e in raw if not e.is_hidden]

    dirs = sorted((e for e in raw if e.is_dir), key=_sort_key)
    files = sorted((e for e in raw if not e.is_dir), key=_sort_key)
    return dirs + files


def format_line(name: str, lineage: Lineage, is_last: bool) -> str:
    """
    Build one tree line: ancestor segments, own connector, then the name.

    Args:
        name: Entry name to display.
        lineage: Was-last flags of every ancestor, outermost first.
        is_last: Whether the entry is the last among its siblings.

    Returns:
        str: The rendered line without a line terminator.
    """
    prefix = "".join(
        const.BLANK_SEGMENT if ancestor_last else const.PIPE_SEGMENT
        for ancestor_last in lineage
    )
    connector = const.LAST_CONNECTOR if is_last else const.BRANCH_CONNECTOR
    return f"{prefix}{connector}{name}"


def root_display_name(root: str) -> str:
    """Resolve the display name of the root ('.' and trailing slashes included)."""
    name = os.path.basename(os.path.normpath(os.path.abspath(root)))
    # Filesystem roots ('/' or 'C:\\') have no base name
    return name or os.path.abspath(root)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _to_entry(de: os.DirEntry) -> DirectoryEntry:
    """Convert a scandir entry, treating undeterminable types as files."""
    try:
        is_dir = de.is_dir()
    except OSError:
        is_dir = False
    return DirectoryEntry(
        name=de.name,
        path=de.path,
        is_dir=is_dir,
        is_hidden=de.name.startswith(const.HIDDEN_MARKER),
    )


def _sort_key(entry: DirectoryEntry):
    return entry.name.lower(), entry.name

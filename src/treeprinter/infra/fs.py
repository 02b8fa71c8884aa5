from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, root validation and output file naming for
the tree printer. Acts as a thin abstraction over the 'os' module so the
CLI and the coordinator never build paths by hand.
"""

import os
from typing import Optional

from treeprinter.domain import constants as const

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles user home shortcuts (~/).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = path if path and path.strip() else fallback
    return os.path.abspath(os.path.expanduser(p))


def get_output_filename(root: str, output_dir: Optional[str] = None) -> str:
    """
    Derive the tree file name from the root directory's base name.

    Args:
        root: Root directory being rendered.
        output_dir: Directory for the file. Defaults to the working directory.

    Returns:
        str: '<rootName>_tree.txt', joined to output_dir when provided.
    """
    base = os.path.basename(os.path.normpath(os.path.abspath(root))) or "root"
    filename = f"{base}{const.OUTPUT_FILE_SUFFIX}"
    if output_dir:
        return os.path.join(output_dir, filename)
    return filename

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def validate_root(path: str) -> Optional[str]:
    """
    Check that the root path exists and is a directory.

    Args:
        path: Path as supplied by the user.

    Returns:
        Optional[str]: User-facing error message, or None if the path is valid.
    """
    if not os.path.exists(path):
        return const.MSG_PATH_NOT_EXIST.format(path=path)
    if not os.path.isdir(path):
        return const.MSG_NOT_A_DIRECTORY.format(path=path)
    return None

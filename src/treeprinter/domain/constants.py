from __future__ import annotations

"""
Domain Constants.

Centralizes the rendering glyphs, the hidden-entry marker, output file
naming, and every user-facing message printed by the CLI.
"""

from typing import List

APP_NAME = "treeprinter"

# -----------------------------------------------------------------------------
# RENDERING GLYPHS
# -----------------------------------------------------------------------------

BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
PIPE_SEGMENT = "│   "
BLANK_SEGMENT = "    "

HIDDEN_MARKER = "."

# -----------------------------------------------------------------------------
# OUTPUT FILE
# -----------------------------------------------------------------------------

OUTPUT_FILE_SUFFIX = "_tree.txt"
OUTPUT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# USER-FACING MESSAGES
# -----------------------------------------------------------------------------

MSG_PATH_NOT_EXIST = "The specified path does not exist: {path}"
MSG_NOT_A_DIRECTORY = "The specified path is not a directory: {path}"
MSG_INVALID_FLAG = "Invalid flag: {flag}"
MSG_FILE_SUCCESS = "Directory tree successfully written to: {filename}"
MSG_FILE_ERROR = "Error writing to file: {error}"
MSG_INTERRUPTED = "Thread was interrupted: {error}"

USAGE_LINES: List[str] = [
    f"Usage: {APP_NAME} <folder-path> [flags]",
    "Flags:",
    "  -c    Print to console only (default)",
    "  -f    Print to file only",
    "  -b    Print to both console and file",
    "  -h    Show hidden files and directories (starting with '.')",
    "Examples:",
    f"  {APP_NAME} /path/to/folder",
    f"  {APP_NAME} /path/to/folder -c -h",
    f"  {APP_NAME} /path/to/folder -f -h",
    f"  {APP_NAME} /path/to/folder -b -h",
]

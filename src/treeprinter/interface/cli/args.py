from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
a RunOptions object. The built-in help flag is disabled because '-h'
selects hidden entries; '--help' prints the usage text instead.
"""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from treeprinter.domain import constants as const
from treeprinter.domain.tree_models import OutputMode

# Exact spellings accepted on the command line; no bundling or attached values
_SWITCH_FLAGS = frozenset({"-c", "-f", "-b", "-h", "--debug", "--help"})
_VALUE_FLAGS = frozenset({"--log-file"})

# -----------------------------------------------------------------------------
# RUN OPTIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RunOptions:
    """
    Runtime configuration resolved from the command line.

    Attributes:
        folder_path: Root directory as typed by the user.
        mode: Output destination(s).
        show_hidden: Include entries starting with '.'.
        debug: Elevate logging verbosity to DEBUG.
        log_file: Optional path for a persistent diagnostic log.
    """
    folder_path: Optional[str]
    mode: OutputMode = OutputMode.CONSOLE_ONLY
    show_hidden: bool = False
    debug: bool = False
    log_file: Optional[str] = None

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeprinter CLI.

    Output-mode flags share one destination so the last one given wins.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=const.APP_NAME,
        description="Print a directory tree to the console, a file, or both.",
        add_help=False,
        allow_abbrev=False,
    )

    p.add_argument("folder_path", nargs="?", default=None)

    # --- Output Mode ---
    p.add_argument(
        "-c",
        dest="mode",
        action="store_const",
        const=OutputMode.CONSOLE_ONLY,
        default=OutputMode.CONSOLE_ONLY,
    )
    p.add_argument("-f", dest="mode", action="store_const", const=OutputMode.FILE_ONLY)
    p.add_argument("-b", dest="mode", action="store_const", const=OutputMode.BOTH)

    # --- Content Selection ---
    p.add_argument("-h", dest="show_hidden", action="store_true")

    # --- Diagnostics ---
    p.add_argument("--debug", action="store_true")
    p.add_argument("--log-file", dest="log_file", default=None)
    p.add_argument("--help", dest="show_usage", action="store_true")

    return p


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse the command line, returning unrecognized tokens instead of failing.

    Flags must match exactly: bundled short flags ('-cf'), attached values
    ('-hx') and a '--log-file' without a value are returned as unrecognized
    rather than being expanded or rejected by argparse.

    Args:
        argv: Argument list. Defaults to sys.argv[1:].

    Returns:
        Tuple[argparse.Namespace, List[str]]: Parsed namespace and leftovers.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    accepted, unknown = _split_exact_flags(tokens)

    namespace, extras = build_parser().parse_known_args(accepted)
    return namespace, unknown + extras

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> RunOptions:
    """Translate the argparse Namespace into RunOptions."""
    return RunOptions(
        folder_path=args.folder_path,
        mode=args.mode,
        show_hidden=bool(args.show_hidden),
        debug=bool(args.debug),
        log_file=args.log_file,
    )


def format_usage() -> str:
    """Return the usage text shown for missing arguments and bad flags."""
    return "\n".join(const.USAGE_LINES)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_exact_flags(tokens: List[str]) -> Tuple[List[str], List[str]]:
    """Separate tokens argparse may see from flags that are not exact matches."""
    accepted: List[str] = []
    unknown: List[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _VALUE_FLAGS:
            value = tokens[i + 1] if i + 1 < len(tokens) else None
            if value is None or value.startswith("-"):
                unknown.append(token)
            else:
                accepted.extend([token, value])
                i += 1
        elif token.startswith("--log-file="):
            accepted.append(token)
        elif token.startswith("-") and token != "-" and token not in _SWITCH_FLAGS:
            unknown.append(token)
        else:
            accepted.append(token)
        i += 1

    return accepted, unknown

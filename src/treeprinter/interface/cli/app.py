from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
root validation, and delegation to the output coordinator. Usage and
validation problems are reported and end the run cleanly; only file
output failures produce a non-zero exit code.
"""

import sys
from typing import List, Optional

from treeprinter.core.services.coordinator import TreeCoordinator
from treeprinter.domain import constants as const
from treeprinter.infra.fs import normalize_path, validate_root
from treeprinter.infra.logging import LoggingConfig, configure_logging, get_logger
from treeprinter.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success and usage errors, 1 when the
        tree file could not be written, 130 on interruption).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    namespace, unknown = cli_args.parse_args(argv)
    options = cli_args.args_to_options(namespace)

    # 2. Logging bootstrap (stderr, so diagnostics never mix with the tree)
    log_level = "DEBUG" if options.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=options.log_file))

    logger.debug(f"CLI invoked with options: {options}")

    # 3. Usage
    if namespace.show_usage or options.folder_path is None:
        _print_usage()
        return 0

    # 4. Root validation
    error = validate_root(options.folder_path)
    if error:
        logger.debug(error)
        print(error)
        return 0

    # 5. Unrecognized flags
    if unknown:
        print(const.MSG_INVALID_FLAG.format(flag=unknown[0]))
        _print_usage()
        return 0

    # 6. Render
    root = normalize_path(options.folder_path)
    coordinator = TreeCoordinator(root, show_hidden=options.show_hidden)
    try:
        outcome = coordinator.run(options.mode)
    except KeyboardInterrupt:
        logger.warning("Rendering interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    return 0 if outcome.ok else 1

# -----------------------------------------------------------------------------
# VIEW HELPERS
# -----------------------------------------------------------------------------

def _print_usage() -> None:
    print(cli_args.format_usage())

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

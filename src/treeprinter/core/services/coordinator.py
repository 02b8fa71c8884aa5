from __future__ import annotations

"""
Output Coordinator.

Drives the tree renderer against the console, a file, or both. File output
runs on a dedicated thread so that, in dual mode, console rendering makes
progress at the same time. Each destination performs its own walk of the
filesystem; the only state shared between them is the failure slot of the
file task, written by the task and read after it has been joined.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from treeprinter.core.analysis.tree_renderer import render_tree
from treeprinter.domain import constants as const
from treeprinter.domain.tree_models import OutputMode, RenderOutcome, StreamTarget
from treeprinter.infra.fs import get_output_filename

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE TASK
# -----------------------------------------------------------------------------

class FileRenderTask:
    """
    Background thread rendering the tree into a text file.

    The thread is non-daemon so the interpreter cannot exit while the file
    is still being written.
    """

    def __init__(self, root: str, output_file: str, show_hidden: bool):
        self.root = root
        self.output_file = output_file
        self.show_hidden = show_hidden
        self.lines_written = 0
        self.error: Optional[Exception] = None
        self._thread = threading.Thread(
            target=self._run,
            name="treeprinter-file-writer",
        )

    def start(self) -> None:
        logger.debug(f"File task started for: {self.output_file}")
        self._thread.start()

    def join(self) -> None:
        self._thread.join()

    def _run(self) -> None:
        try:
            with open(
                    self.output_file,
                    "w",
                    encoding=const.OUTPUT_ENCODING,
                    errors="surrogateescape",
                    newline="\n",
            ) as f:
                self.lines_written = render_tree(self.root, StreamTarget(f), self.show_hidden)
            logger.info(f"Tree saved to file: {self.output_file} ({self.lines_written} lines)")
        except Exception as e:
            # Every failure lands in the slot read after join()
            logger.error(f"Failed to save tree to '{self.output_file}': {e}")
            self.error = e

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeCoordinator:
    """
    Render a validated root directory to the requested destination(s).

    Args:
        root: Validated root directory.
        show_hidden: Include entries starting with the hidden marker.
        output_dir: Directory for the tree file (working directory if None).
        stdout: Console stream. Resolved to sys.stdout at run time if None.
    """

    def __init__(
            self,
            root: str,
            show_hidden: bool = False,
            output_dir: Optional[str] = None,
            stdout: Optional[TextIO] = None,
    ):
        self.root = root
        self.show_hidden = show_hidden
        self.output_dir = output_dir
        self._stdout = stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def run(self, mode: OutputMode) -> RenderOutcome:
        """
        Execute one render pass for the given output mode.

        Console output always completes in full. File failures and an
        interrupted wait are reported to the console and recorded on the
        outcome; neither is raised.

        Args:
            mode: Destination selection.

        Returns:
            RenderOutcome: Summary of what was written and what failed.
        """
        logger.debug(f"Rendering '{self.root}' (mode={mode.value}, hidden={self.show_hidden})")

        if not mode.writes_file:
            return RenderOutcome(mode=mode, console_lines=self._render_console())

        output_file = get_output_filename(self.root, self.output_dir)
        task = FileRenderTask(self.root, output_file, self.show_hidden)

        # Dual mode: the file task runs while the console renders on this thread
        task.start()
        console_lines = self._render_console() if mode.writes_console else 0

        return self._await_file_task(task, mode, console_lines)

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _render_console(self) -> int:
        out = self.stdout
        lines = render_tree(self.root, StreamTarget(out), self.show_hidden)
        out.flush()
        return lines

    def _await_file_task(
            self,
            task: FileRenderTask,
            mode: OutputMode,
            console_lines: int,
    ) -> RenderOutcome:
        try:
            task.join()
        except KeyboardInterrupt as e:
            logger.warning("Interrupted while waiting for the file task.")
            self._report(const.MSG_INTERRUPTED.format(error=e))
            return RenderOutcome(
                mode=mode,
                output_file=task.output_file,
                console_lines=console_lines,
                interrupted=True,
            )

        file_error = None
        if task.error is not None:
            file_error = str(task.error)
            self._report(const.MSG_FILE_ERROR.format(error=file_error))
        else:
            self._report(const.MSG_FILE_SUCCESS.format(filename=task.output_file))

        return RenderOutcome(
            mode=mode,
            output_file=task.output_file,
            console_lines=console_lines,
            file_lines=task.lines_written,
            file_error=file_error,
        )

    def _report(self, message: str) -> None:
        print(message, file=self.stdout)

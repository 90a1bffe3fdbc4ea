"""Display service for repository status output"""
from threading import Lock
from typing import Optional

from rich.console import Console
from rich.markup import escape

from git_springclean.constants import LEGEND_TEXT
from git_springclean.formatters import format_error_line, format_status_line, printable
from git_springclean.logging_config import get_logger
from git_springclean.models.status import ClassificationResult, RunSummary

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)

# Paths are printed verbatim: no markup, emoji codes, highlighting or wrapping
_PLAIN = dict(markup=False, emoji=False, highlight=False, soft_wrap=True)


class DisplayService:
    """Writes status lines to stdout and diagnostics to stderr.

    Writes are serialized, so results may be emitted from worker threads.
    """

    def __init__(
        self,
        verbose: bool = False,
        only_issues: bool = False,
        out: Optional[Console] = None,
        err: Optional[Console] = None,
    ):
        self.verbose = verbose
        self.only_issues = only_issues
        self.out = out or console
        self.err = err or error_console
        self._lock = Lock()

    def display_result(self, result: ClassificationResult) -> None:
        """Print the status line of one repository, and its diagnostic if it failed."""
        if self.only_issues and result.flags.is_clean:
            logger.debug(f"Not listing clean repository {result.path}")
            return

        encoding = self.out.encoding
        with self._lock:
            self.out.print(format_status_line(result, encoding), **_PLAIN)
            if self.verbose:
                for branch in result.unpushed_branches:
                    self.out.print(f"     unpushed: {printable(branch, encoding)}", **_PLAIN)
            if result.flags.has_error:
                self.err.print(format_error_line(result, self.err.encoding), **_PLAIN)

    def display_summary(self, summary: RunSummary) -> None:
        """Print scan totals and the flag legend to stderr."""
        with self._lock:
            self.err.print(
                f"Scanned {summary.repositories} repositories: "
                f"{summary.with_issues} flagged, {summary.with_errors} with errors",
                highlight=False,
                soft_wrap=True,
            )
            if summary.skipped_directories:
                self.err.print(
                    f"[yellow]Skipped {summary.skipped_directories} unreadable directories[/yellow]",
                    soft_wrap=True,
                )
            self.err.print(LEGEND_TEXT.rstrip(), **_PLAIN)

    def display_fatal(self, message: str) -> None:
        """Print a fatal top-level error."""
        with self._lock:
            message = escape(printable(message, self.err.encoding))
            self.err.print(f"[red]Error: {message}[/red]", highlight=False, soft_wrap=True)

"""Command-line entry point for git-springclean"""

from typing import Optional, Sequence

from rich.console import Console

from git_springclean.cli.args import build_parser
from git_springclean.config import Config
from git_springclean.constants import EXIT_FATAL, EXIT_INTERRUPTED, EXIT_ISSUES, EXIT_OK
from git_springclean.core import SpringClean
from git_springclean.exceptions import FatalError
from git_springclean.logging_config import get_logger, setup_logging
from git_springclean.services.display_service import DisplayService
from git_springclean.utils.threading import get_threading_info

console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application. Returns the process exit code."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            root=parsed_args.path,
            only_issues=parsed_args.only_issues,
            exit_code=parsed_args.exit_code,
            check_modified=not parsed_args.no_modified,
            check_untracked=not parsed_args.no_untracked,
            check_unpushed=not parsed_args.no_unpushed,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            sequential=parsed_args.sequential,
            workers=parsed_args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    if config.debug:
        console.print("[yellow]Debug mode enabled[/yellow]")
        threading_info = get_threading_info(config.workers)
        console.print("[yellow]Threading Information:[/yellow]")
        console.print(f"  Python version: {threading_info['python_version']}")
        console.print(f"  Free-threading enabled: {threading_info['free_threading']}")
        console.print(f"  CPU count: {threading_info['cpu_count']}")
        console.print(f"  Workers: {threading_info['workers']}")
        console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {value}", markup=False)
        console.print("[dim]Note: Debug mode forces sequential processing for readable logs[/dim]")

    display = DisplayService(verbose=config.verbose, only_issues=config.only_issues)
    try:
        summary = SpringClean(config, display=display).run()
    except FatalError as e:
        display.display_fatal(str(e))
        return EXIT_FATAL
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted![/yellow]")
        return EXIT_INTERRUPTED

    if config.exit_code and summary.has_issues:
        return EXIT_ISSUES
    return EXIT_OK

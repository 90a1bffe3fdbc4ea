"""Command-line argument parsing for git-springclean."""

import argparse
from typing import Optional, Sequence

from git_springclean.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-springclean",
        description="Find Git repositories under a directory and flag forgotten work: "
        "modified (M) or untracked (U) files, unpushed branches (P) and repositories "
        "that could not be inspected (E)",
        epilog="Read-only: no repository is modified and no remote is contacted.",
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="Directory to scan (default: current directory)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-springclean {__version__}")
    parser.add_argument(
        "-q",
        "--only-issues",
        action="store_true",
        help="Only list repositories with at least one flag set",
    )
    parser.add_argument(
        "-M", "--no-modified", action="store_true", help="Don't report modified files"
    )
    parser.add_argument(
        "-U", "--no-untracked", action="store_true", help="Don't report untracked files"
    )
    parser.add_argument(
        "-P", "--no-unpushed", action="store_true", help="Don't report unpushed branches"
    )
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when any repository is flagged",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for repository checks (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Force sequential processing (disable parallelism)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)

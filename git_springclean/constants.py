"""Shared constants for git-springclean."""

from dataclasses import dataclass
from typing import List


# Marker entry that makes a directory a repository root
GIT_METADATA_DIR = ".git"

# `git status --porcelain` codes
PORCELAIN_UNTRACKED = "??"
PORCELAIN_IGNORED = "!!"


@dataclass
class FlagDefinition:
    """Definition of one position in the status flag field."""

    attribute: str
    symbol: str
    description: str


# Flag field, in display order
FLAGS: List[FlagDefinition] = [
    FlagDefinition("has_modifications", "M", "Modified files"),
    FlagDefinition("has_untracked", "U", "Untracked files"),
    FlagDefinition("has_unpushed_branch", "P", "Unpushed branches"),
    FlagDefinition("has_error", "E", "Error while inspecting"),
]

SYMBOL_UNSET = "-"


# Exit codes
EXIT_OK = 0
EXIT_ISSUES = 1  # Only with --exit-code
EXIT_FATAL = 2
EXIT_INTERRUPTED = 130


# Legend text for verbose output
LEGEND_TEXT = """
Legend:
M = Modified files        U = Untracked files
P = Unpushed branches     E = Error while inspecting
"""

"""Status line formatting utilities."""
import os

from git_springclean.constants import FLAGS, SYMBOL_UNSET
from git_springclean.models.status import ClassificationResult, StatusFlags


def printable(text: str, encoding: str = "utf-8") -> str:
    """
    Make text safe to write to a stream with the given encoding.

    Names that are not valid in the filesystem encoding come back from
    os.scandir with surrogate escapes. Their original bytes are shown as
    backslash escapes instead of failing the write.

    Example:
        "bad\\udcff" -> "bad\\\\xff"
    """
    return os.fsencode(text).decode(encoding, "backslashreplace")


def format_flags(flags: StatusFlags) -> str:
    """
    Format status flags as a fixed-width, position-coded field.

    Args:
        flags: Status flags of one repository

    Returns:
        Four characters, one per flag, "-" where unset

    Example:
        "M-P-" for a repository with modifications and an unpushed branch
    """
    return "".join(
        flag.symbol if getattr(flags, flag.attribute) else SYMBOL_UNSET for flag in FLAGS
    )


def format_status_line(result: ClassificationResult, encoding: str = "utf-8") -> str:
    """Format the summary line for a repository: flags, one space, path."""
    return f"{format_flags(result.flags)} {printable(result.path, encoding)}"


def format_error_line(result: ClassificationResult, encoding: str = "utf-8") -> str:
    """Format the diagnostic line for a repository whose inspection failed."""
    return printable(f"{result.path}: {result.error_message}", encoding)

"""Formatting utilities for git-springclean output."""

from .status import format_flags, format_status_line, format_error_line, printable

__all__ = ["format_flags", "format_status_line", "format_error_line", "printable"]

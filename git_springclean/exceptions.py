"""Custom exceptions for git-springclean"""

from typing import Optional


class GitSpringcleanError(Exception):
    """Base exception for all git-springclean errors."""
    pass


class GitQueryError(GitSpringcleanError):
    """Exception raised when a Git query against one repository fails."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git query '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class FatalError(GitSpringcleanError):
    """Exception raised when the scan cannot start or continue at all."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Unable to read {path}: {message}")

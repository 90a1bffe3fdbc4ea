"""Logging configuration for git-springclean"""
import copy
import logging
import sys
from typing import Optional, TextIO


class ColoredFormatter(logging.Formatter):
    """Formatter that colors level names when writing to a terminal."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = False):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        """Format log record, coloring a copy so other handlers see the plain level name."""
        if self.use_color and record.levelname in self.COLORS:
            record = copy.copy(record)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the application.

    Logs never go to stdout, which carries only the status lines.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages and detailed formatting
        stream: Where to write log messages (default: stderr)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    stream = stream or sys.stderr
    use_color = hasattr(stream, "isatty") and stream.isatty()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)

    if debug:
        # Thread name matters once repositories are checked in parallel
        formatter = ColoredFormatter(
            fmt='%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            use_color=use_color,
        )
    else:
        formatter = ColoredFormatter(fmt='[%(name)s] %(message)s', use_color=use_color)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # GitPython logs every command it runs at DEBUG
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # Strip the package prefix for cleaner log names
    if name.startswith('git_springclean.'):
        name = name.replace('git_springclean.', '')
    if name.startswith('services.'):
        name = name.replace('services.', '')

    return logging.getLogger(name)

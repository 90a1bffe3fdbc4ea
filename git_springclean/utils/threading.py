"""Worker pool sizing for repository classification."""

import os
import sys
from typing import Any, Dict, Optional

# Each classification spends most of its time waiting on git subprocesses
MAX_WORKERS = 32


def is_free_threading_enabled() -> bool:
    """Return True on a free-threaded interpreter (Python 3.13+ with the GIL disabled)."""
    is_gil_enabled = getattr(sys, "_is_gil_enabled", None)
    return is_gil_enabled is not None and not is_gil_enabled()


def get_optimal_worker_count(user_specified: Optional[int] = None) -> int:
    """Calculate the worker count for classifying repositories.

    Args:
        user_specified: User-specified worker count, if provided

    Returns:
        Number of workers for the classification pool
    """
    if user_specified is not None and user_specified > 0:
        return user_specified

    cpu_count = os.cpu_count() or 1
    return min(MAX_WORKERS, cpu_count + 4)


def get_threading_info(user_specified: Optional[int] = None) -> Dict[str, Any]:
    """Describe the interpreter threading mode and the chosen worker count."""
    return {
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "workers": get_optimal_worker_count(user_specified),
    }

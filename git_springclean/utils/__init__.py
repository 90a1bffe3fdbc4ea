"""Utility functions for git-springclean."""

from .threading import get_optimal_worker_count, get_threading_info

__all__ = ["get_optimal_worker_count", "get_threading_info"]

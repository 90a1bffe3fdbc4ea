"""Core scanning logic for git-springclean."""

from .springclean import SpringClean

__all__ = ["SpringClean"]

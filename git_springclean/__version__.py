"""Version information for git-springclean."""

__version__ = "0.3.0"

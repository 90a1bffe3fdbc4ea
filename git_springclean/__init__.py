"""
git-springclean - find forgotten work in a tree of Git repositories
"""

from .__version__ import __version__
from .core import SpringClean
from .cli.main import main

__all__ = ["SpringClean", "main", "__version__"]

"""Services for discovering, querying, classifying and displaying repositories."""

from .classifier_service import RepositoryClassifier
from .discovery_service import RepositoryWalker
from .display_service import DisplayService
from .git_service import GitService
from .vcs import VersionControlBackend

__all__ = [
    "RepositoryClassifier",
    "RepositoryWalker",
    "DisplayService",
    "GitService",
    "VersionControlBackend",
]

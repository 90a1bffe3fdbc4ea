"""Service for classifying the status of a repository"""

from typing import TYPE_CHECKING, Union

from git_springclean.formatters import printable
from git_springclean.logging_config import get_logger
from git_springclean.models.status import ClassificationResult, StatusFlags
from git_springclean.services.vcs import VersionControlBackend

if TYPE_CHECKING:
    from git_springclean.config import Config

logger = get_logger(__name__)


class RepositoryClassifier:
    """Service for deriving the status flags of one repository."""

    def __init__(self, backend: VersionControlBackend, config: Union["Config", dict]):
        """Initialize the service."""
        self.backend = backend
        self.config = config
        self.check_modified = config.get("check_modified", True)
        self.check_untracked = config.get("check_untracked", True)
        self.check_unpushed = config.get("check_unpushed", True)

    def classify(self, path: str) -> ClassificationResult:
        """Classify a repository root.

        Never raises. The first failing query abandons the remaining
        checks, and an errored result carries no other flag.
        """
        logger.debug(f"Classifying repository: {path}")
        try:
            return self._classify(path)
        except Exception as e:
            logger.warning(printable(f"Error inspecting {path}: {e}"))
            return ClassificationResult.failed(path, str(e) or type(e).__name__)

    def _classify(self, path: str) -> ClassificationResult:
        has_modifications = False
        has_untracked = False
        unpushed = ()

        if self.check_modified:
            has_modifications = self.backend.has_working_tree_changes(path)
            logger.debug(f"{path}: modifications={has_modifications}")

        if self.check_untracked:
            has_untracked = self.backend.has_untracked_files(path)
            logger.debug(f"{path}: untracked={has_untracked}")

        if self.check_unpushed:
            branches = self.backend.list_local_branches_with_upstream_state(path)
            unpushed = tuple(branch.name for branch in branches if branch.is_unpushed)
            logger.debug(f"{path}: {len(branches)} local branches, unpushed={list(unpushed)}")

        flags = StatusFlags(
            has_modifications=has_modifications,
            has_untracked=has_untracked,
            has_unpushed_branch=bool(unpushed),
        )
        return ClassificationResult(path=path, flags=flags, unpushed_branches=unpushed)

"""Version-control capability consumed by the walker and the classifier"""

from typing import List, Protocol

from git_springclean.models.status import BranchUpstreamState


class VersionControlBackend(Protocol):
    """Protocol implemented by version-control query backends.

    Query methods raise on failure; callers decide how failures surface.
    """

    def is_repository_root(self, path: str) -> bool:
        """Return True when path is the top of a working tree."""

    def has_working_tree_changes(self, repo_root: str) -> bool:
        """Return True when tracked paths have staged or unstaged changes."""

    def has_untracked_files(self, repo_root: str) -> bool:
        """Return True when a file is neither tracked nor ignored."""

    def list_local_branches_with_upstream_state(self, repo_root: str) -> List[BranchUpstreamState]:
        """Return the upstream tracking state of every local branch."""

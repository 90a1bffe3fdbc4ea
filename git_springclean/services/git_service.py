"""Git query service"""
import os
from contextlib import contextmanager
from typing import List

import git

from git_springclean.constants import GIT_METADATA_DIR, PORCELAIN_IGNORED, PORCELAIN_UNTRACKED
from git_springclean.exceptions import GitQueryError
from git_springclean.logging_config import get_logger
from git_springclean.models.status import BranchUpstreamState

logger = get_logger(__name__)


def _command_stderr(error: git.exc.GitCommandError) -> str:
    """Get the stderr text of a failed git command, falling back to the full error."""
    # GitPython formats stderr as "\n  stderr: '<text>'"
    stderr = (error.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class GitService:
    """Read-only Git queries backed by GitPython.

    The service holds no repository state. Every query opens a fresh
    git.Repo and closes it afterwards, so one instance can be shared by
    worker threads.
    """

    def is_repository_root(self, path: str) -> bool:
        """Check for the .git marker (a directory, or a file for worktrees and submodules)."""
        return os.path.lexists(os.path.join(path, GIT_METADATA_DIR))

    @contextmanager
    def _open_repo(self, repo_root: str, operation: str):
        """Open a repository and convert GitPython failures into GitQueryError."""
        try:
            repo = git.Repo(repo_root)
        except git.exc.InvalidGitRepositoryError as e:
            raise GitQueryError(operation, message=f"not a valid git repository ({e})") from e
        except git.exc.NoSuchPathError as e:
            raise GitQueryError(operation, message=f"no such path ({e})") from e
        except Exception as e:
            raise GitQueryError(operation, message=str(e)) from e

        try:
            yield repo
        except git.exc.GitCommandError as e:
            raise GitQueryError(operation, message=_command_stderr(e)) from e
        except Exception as e:
            # Broken object database or refs (gitdb raises its own types)
            raise GitQueryError(operation, message=f"{type(e).__name__}: {e}") from e
        finally:
            repo.close()

    def _porcelain_status(self, repo: git.Repo, untracked_mode: str) -> List[str]:
        """Run `git status --porcelain` and return its non-empty lines."""
        output = repo.git.status("--porcelain", f"--untracked-files={untracked_mode}")
        return [line for line in output.split("\n") if len(line) >= 2]

    def has_working_tree_changes(self, repo_root: str) -> bool:
        """Check for staged or unstaged changes to tracked files."""
        with self._open_repo(repo_root, "working_tree_status") as repo:
            for line in self._porcelain_status(repo, "no"):
                # Format: XY path, X = index status, Y = working tree status
                if line[:2] in (PORCELAIN_UNTRACKED, PORCELAIN_IGNORED):
                    continue
                logger.debug(f"{repo_root}: change '{line}'")
                return True
        return False

    def has_untracked_files(self, repo_root: str) -> bool:
        """Check for files that are neither tracked nor ignored."""
        with self._open_repo(repo_root, "untracked_files") as repo:
            for line in self._porcelain_status(repo, "normal"):
                if line.startswith(PORCELAIN_UNTRACKED):
                    logger.debug(f"{repo_root}: untracked '{line[3:]}'")
                    return True
        return False

    def list_local_branches_with_upstream_state(self, repo_root: str) -> List[BranchUpstreamState]:
        """Get the upstream state of every local branch.

        Only locally cached remote-tracking refs are consulted; no remote
        is contacted.
        """
        states = []
        with self._open_repo(repo_root, "branch_upstream_state") as repo:
            for head in repo.heads:
                states.append(self._branch_state(repo, head))
        return states

    def _branch_state(self, repo: git.Repo, head: git.Head) -> BranchUpstreamState:
        """Get the upstream state of a single local branch."""
        tracking = head.tracking_branch()
        if tracking is None:
            logger.debug(f"Branch {head.name} has no upstream configured")
            return BranchUpstreamState(name=head.name, upstream=None, has_upstream=False)

        if not tracking.is_valid():
            # Upstream configured but its remote-tracking ref is gone
            logger.debug(f"Branch {head.name} tracks {tracking.name}, which does not exist locally")
            return BranchUpstreamState(name=head.name, upstream=tracking.name, has_upstream=False)

        # Equal tips count as ancestor, so a synced branch is not ahead
        is_ahead = not repo.is_ancestor(head.commit, tracking.commit)
        logger.debug(f"Branch {head.name} tracks {tracking.name}, ahead={is_ahead}")
        return BranchUpstreamState(
            name=head.name,
            upstream=tracking.name,
            has_upstream=True,
            is_ahead_of_upstream=is_ahead,
        )

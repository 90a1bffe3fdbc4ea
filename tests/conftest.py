"""Pytest fixtures for git-springclean tests"""
import logging
import tempfile
from pathlib import Path

import git
import pytest

from git_springclean.models.status import BranchUpstreamState


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging during a test."""
    root_logger = logging.getLogger()
    git_logger = logging.getLogger("git")
    handlers = root_logger.handlers[:]
    level = root_logger.level
    git_level = git_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    git_logger.setLevel(git_level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workspace(temp_dir):
    """Directory tree to scan. Bare remotes live outside of it."""
    path = temp_dir / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'only_issues': False,
        'check_modified': True,
        'check_untracked': True,
        'check_unpushed': True,
        'sequential': True,
    }


@pytest.fixture
def make_repo(temp_dir, workspace):
    """Factory creating a real Git repository with one commit on main.

    With with_remote=True, a bare repository is added as origin and main
    is pushed to it with upstream tracking, so the repository starts clean
    and fully pushed.
    """
    repos = []

    def _make_repo(name: str = "test_repo", with_remote: bool = True) -> git.Repo:
        repo_path = workspace / name
        repo_path.mkdir(parents=True)
        repo = git.Repo.init(repo_path)

        # Configure git user for commits
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        test_file = repo_path / "README.md"
        test_file.write_text("# Test Repository\n")
        repo.index.add(["README.md"])
        repo.index.commit("Initial commit")
        repo.git.branch('-M', 'main')

        if with_remote:
            remote_path = temp_dir / "remotes" / f"{name.replace('/', '_')}.git"
            remote_path.parent.mkdir(exist_ok=True)
            git.Repo.init(remote_path, bare=True).close()
            repo.create_remote('origin', str(remote_path))
            repo.git.push('-u', 'origin', 'main')

        repos.append(repo)
        return repo

    yield _make_repo

    for repo in repos:
        repo.close()


@pytest.fixture
def git_repo(make_repo):
    """A clean repository whose main branch tracks origin/main at the same tip."""
    return make_repo()


def commit_file(repo: git.Repo, name: str, content: str, message: str = "Add file") -> None:
    """Write a file into the working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


class FakeBackend:
    """Canned version-control backend that records the queries it receives."""

    def __init__(
        self,
        modifications=False,
        untracked=False,
        branches=None,
        errors=None,
        roots=None,
    ):
        self.modifications = modifications
        self.untracked = untracked
        self.branches = branches if branches is not None else [
            BranchUpstreamState(name="main", upstream="origin/main", has_upstream=True)
        ]
        self.errors = errors or {}
        self.roots = roots
        self.calls = []

    def _query(self, operation, path, value):
        self.calls.append((operation, path))
        if operation in self.errors:
            raise self.errors[operation]
        if isinstance(value, dict):
            return value.get(path, value.get("*"))
        return value

    def is_repository_root(self, path):
        if self.roots is None:
            return (Path(path) / ".git").exists()
        return str(path) in self.roots

    def has_working_tree_changes(self, repo_root):
        return self._query("modifications", repo_root, self.modifications)

    def has_untracked_files(self, repo_root):
        return self._query("untracked", repo_root, self.untracked)

    def list_local_branches_with_upstream_state(self, repo_root):
        return self._query("branches", repo_root, self.branches)


@pytest.fixture
def fake_backend():
    """A backend reporting a clean, fully pushed repository."""
    return FakeBackend()

"""Service for discovering repository roots under a directory"""

import os
from typing import Iterator, List

from git_springclean.exceptions import FatalError
from git_springclean.logging_config import get_logger
from git_springclean.services.vcs import VersionControlBackend

logger = get_logger(__name__)


class RepositoryWalker:
    """Depth-first walk that yields repository roots and prunes below them."""

    def __init__(self, backend: VersionControlBackend):
        """Initialize the walker.

        Args:
            backend: Capability used to recognise repository roots
        """
        self.backend = backend
        self.skipped_directories = 0

    def walk(self, root: str) -> Iterator[str]:
        """Yield repository roots at or below root.

        Paths keep the form of root (relative stays relative). Siblings are
        visited in name order, so a fixed tree always yields the same
        sequence.

        Raises:
            FatalError: root itself cannot be listed
        """
        if self.backend.is_repository_root(root):
            logger.debug(f"Root {root} is itself a repository")
            yield root
            return

        try:
            pending = list(reversed(self._list_subdirectories(root)))
        except OSError as e:
            raise FatalError(root, e.strerror or str(e)) from e

        while pending:
            path = pending.pop()

            if self.backend.is_repository_root(path):
                logger.debug(f"Found repository: {path}")
                yield path
                continue

            try:
                subdirectories = self._list_subdirectories(path)
            except OSError as e:
                self.skipped_directories += 1
                logger.info(f"Skipping {path}: {e.strerror or e}")
                continue

            # Reversed so the stack pops them in name order
            pending.extend(reversed(subdirectories))

    def _list_subdirectories(self, path: str) -> List[str]:
        """List subdirectories of path, sorted by name, without following symlinks."""
        subdirectories = []
        with os.scandir(path) as entries:
            for entry in entries:
                if self._is_real_directory(entry):
                    subdirectories.append(entry.name)
        return [os.path.join(path, name) for name in sorted(subdirectories)]

    def _is_real_directory(self, entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Cannot stat {entry.path}: {e}")
            return False

"""Core functionality for git-springclean"""

import os
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Deque, Iterable, Optional, Tuple, Union

from git_springclean.config import Config
from git_springclean.exceptions import FatalError
from git_springclean.logging_config import get_logger
from git_springclean.models.status import ClassificationResult, RunSummary
from git_springclean.services.classifier_service import RepositoryClassifier
from git_springclean.services.discovery_service import RepositoryWalker
from git_springclean.services.display_service import DisplayService
from git_springclean.services.git_service import GitService
from git_springclean.services.vcs import VersionControlBackend
from git_springclean.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class SpringClean:
    """Walks a directory tree and reports the status of every repository in it."""

    def __init__(
        self,
        config: Union[Config, dict],
        backend: Optional[VersionControlBackend] = None,
        display: Optional[DisplayService] = None,
    ):
        """Initialize SpringClean.

        Args:
            config: Configuration dict or Config object
            backend: Version-control queries (defaults to GitService)
            display: Output sink (defaults to DisplayService on stdout/stderr)
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.root = self.config.root
        self.verbose = self.config.verbose

        self.backend = backend or GitService()
        self.walker = RepositoryWalker(self.backend)
        self.classifier = RepositoryClassifier(self.backend, self.config)
        self.display = display or DisplayService(
            verbose=self.verbose, only_issues=self.config.only_issues
        )

    def validate_root(self) -> None:
        """Make sure the scan root is an existing directory.

        Raises:
            FatalError: root is missing or not a directory
        """
        if not os.path.exists(self.root):
            raise FatalError(self.root, "No such file or directory")
        if not os.path.isdir(self.root):
            raise FatalError(self.root, "Not a directory")

    def run(self) -> RunSummary:
        """Scan the tree, printing one line per repository in discovery order.

        Raises:
            FatalError: the root cannot be scanned; nothing has been printed
        """
        self.validate_root()
        summary = RunSummary()
        paths = self.walker.walk(self.root)

        if self.config.use_parallel:
            self._process_parallel(paths, summary)
        else:
            self._process_sequential(paths, summary)

        summary.skipped_directories = self.walker.skipped_directories
        logger.info(
            f"Scanned {summary.repositories} repositories under {self.root}, "
            f"{summary.with_issues} flagged"
        )
        if self.verbose:
            self.display.display_summary(summary)
        return summary

    def _emit(self, result: ClassificationResult, summary: RunSummary) -> None:
        summary.record(result)
        self.display.display_result(result)

    def _process_sequential(self, paths: Iterable[str], summary: RunSummary) -> None:
        """Classify repositories one after another."""
        for path in paths:
            self._emit(self.classifier.classify(path), summary)

    def _process_parallel(self, paths: Iterable[str], summary: RunSummary) -> None:
        """Classify repositories on a bounded worker pool.

        Futures are queued in discovery order and only the head of the
        queue is emitted, so output order matches the sequential mode. The
        walk is consumed lazily, keeping at most two rounds of work in flight.
        """
        max_workers = get_optimal_worker_count(self.config.workers)
        max_in_flight = max_workers * 2
        logger.debug(f"Using {max_workers} workers for parallel processing")

        pending: Deque[Tuple[str, Future]] = deque()
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            try:
                for path in paths:
                    pending.append((path, executor.submit(self.classifier.classify, path)))
                    if len(pending) >= max_in_flight:
                        self._emit_next(pending, summary)
                while pending:
                    self._emit_next(pending, summary)
            finally:
                # Only non-empty when interrupted or the walk failed
                for _, future in pending:
                    future.cancel()

    def _emit_next(self, pending: Deque[Tuple[str, Future]], summary: RunSummary) -> None:
        path, future = pending.popleft()
        try:
            result = future.result()
        except Exception as e:
            logger.error(f"Error processing repository {path}: {e}")
            result = ClassificationResult.failed(path, str(e))
        self._emit(result, summary)

"""Repository status models"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StatusFlags:
    """The four independent status flags of one repository.

    An error makes the other three flags unknown, so they must be unset
    whenever has_error is set.
    """
    has_modifications: bool = False
    has_untracked: bool = False
    has_unpushed_branch: bool = False
    has_error: bool = False

    def __post_init__(self):
        if self.has_error and (
            self.has_modifications or self.has_untracked or self.has_unpushed_branch
        ):
            raise ValueError("an errored status cannot carry other flags")

    @classmethod
    def error(cls) -> "StatusFlags":
        """Flags for a repository whose inspection failed."""
        return cls(has_error=True)

    @property
    def is_clean(self) -> bool:
        return not (
            self.has_modifications
            or self.has_untracked
            or self.has_unpushed_branch
            or self.has_error
        )


@dataclass(frozen=True)
class BranchUpstreamState:
    """Upstream tracking state of a local branch."""
    name: str
    upstream: Optional[str]  # Configured upstream ref, None when not configured
    has_upstream: bool  # Configured and the remote-tracking ref exists locally
    is_ahead_of_upstream: bool = False

    @property
    def is_unpushed(self) -> bool:
        return not self.has_upstream or self.is_ahead_of_upstream


@dataclass(frozen=True)
class ClassificationResult:
    """Classification of one repository root."""
    path: str
    flags: StatusFlags
    error_message: Optional[str] = None  # Only set when flags.has_error
    unpushed_branches: Tuple[str, ...] = ()

    @classmethod
    def failed(cls, path: str, message: str) -> "ClassificationResult":
        return cls(path=path, flags=StatusFlags.error(), error_message=message)


@dataclass
class RunSummary:
    """Counters collected over one scan."""
    repositories: int = 0
    with_issues: int = 0
    with_errors: int = 0
    skipped_directories: int = 0

    def record(self, result: ClassificationResult) -> None:
        """Count a result. The result itself is not kept."""
        self.repositories += 1
        if not result.flags.is_clean:
            self.with_issues += 1
        if result.flags.has_error:
            self.with_errors += 1

    @property
    def has_issues(self) -> bool:
        return self.with_issues > 0

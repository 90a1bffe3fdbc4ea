"""Configuration handling for git-springclean"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration for git-springclean with validation."""

    # Scan root
    root: str = "."

    # Reporting
    only_issues: bool = False  # Skip clean repositories in the listing
    exit_code: bool = False  # Exit with status 1 when any repository is flagged

    # Individual checks
    check_modified: bool = True
    check_untracked: bool = True
    check_unpushed: bool = True

    # Execution modes
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Force sequential processing (disable parallelism)
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_root()
        self._validate_workers()

    def _validate_root(self):
        """Validate root is not empty."""
        if not self.root or not str(self.root).strip():
            raise ValueError("root cannot be empty")
        self.root = str(self.root)

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    @property
    def use_parallel(self) -> bool:
        """Whether repositories should be classified on a worker pool."""
        return not (self.sequential or self.debug)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "root": self.root,
            "only_issues": self.only_issues,
            "exit_code": self.exit_code,
            "check_modified": self.check_modified,
            "check_untracked": self.check_untracked,
            "check_unpushed": self.check_unpushed,
            "verbose": self.verbose,
            "debug": self.debug,
            "sequential": self.sequential,
            "workers": self.workers,
        }

    def get(self, key: str, default=None):
        """Get config value by key, so services accept a Config or a dict."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "root",
            "only_issues",
            "exit_code",
            "check_modified",
            "check_untracked",
            "check_unpushed",
            "verbose",
            "debug",
            "sequential",
            "workers",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

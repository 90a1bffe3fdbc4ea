"""Data models for git-springclean."""

from .status import BranchUpstreamState, ClassificationResult, RunSummary, StatusFlags

__all__ = ["BranchUpstreamState", "ClassificationResult", "RunSummary", "StatusFlags"]

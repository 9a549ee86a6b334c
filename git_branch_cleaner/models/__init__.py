"""Data models for git-branch-cleaner."""

from .branch import (
    Branch,
    BranchClassification,
    BranchOutcome,
    CleanupReport,
    PullRequestState,
)

__all__ = [
    "Branch",
    "BranchClassification",
    "BranchOutcome",
    "CleanupReport",
    "PullRequestState",
]

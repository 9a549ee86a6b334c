"""Shared constants for git-branch-cleaner."""

from dataclasses import dataclass
from typing import List

from git_branch_cleaner.models.branch import BranchClassification


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    label: str
    width: int = 0  # 0 means auto-width


COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("Branch", 30),
    ColumnDefinition("State", 18),
    ColumnDefinition("Action", 12),
    ColumnDefinition("Notes", 40),
]


# Classification display names
CLASSIFICATION_DISPLAY = {
    BranchClassification.DEFAULT: "default",
    BranchClassification.UNPUSHED: "not pushed",
    BranchClassification.PUSHED_NO_PR: "no PRs",
    BranchClassification.PUSHED_OPEN_PR: "open PR",
    BranchClassification.PUSHED_ALL_CLOSED: "all PRs closed",
}
UNKNOWN_CLASSIFICATION_DISPLAY = "unknown"


# CLI colors (Rich color names), keyed by disposition
DISPOSITION_COLORS = {
    "deleted": "red",
    "would delete": "yellow",
    "error": "bold red",
    "retained": None,  # Default color
}
DEFAULT_BRANCH_COLOR = "cyan"

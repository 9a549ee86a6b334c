"""Classification and disposition formatting utilities."""

from typing import Optional

from git_branch_cleaner.constants import (
    CLASSIFICATION_DISPLAY,
    DEFAULT_BRANCH_COLOR,
    DISPOSITION_COLORS,
    UNKNOWN_CLASSIFICATION_DISPLAY,
)
from git_branch_cleaner.models.branch import BranchClassification, BranchOutcome


def format_classification(classification: Optional[BranchClassification]) -> str:
    """
    Format a classification as display text.

    Args:
        classification: Classification, or None when PR data was unavailable

    Returns:
        Display text for the classification
    """
    if classification is None:
        return UNKNOWN_CLASSIFICATION_DISPLAY
    return CLASSIFICATION_DISPLAY.get(classification, classification.value)


def format_notes(outcome: BranchOutcome) -> str:
    """Error message for the outcome, if any."""
    return str(outcome.error) if outcome.error is not None else ""


def get_row_style(outcome: BranchOutcome) -> Optional[str]:
    """Rich style for a report row."""
    if outcome.classification is BranchClassification.DEFAULT:
        return DEFAULT_BRANCH_COLOR
    return DISPOSITION_COLORS.get(outcome.disposition)

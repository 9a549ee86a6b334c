"""Formatting utilities for report output."""

from .status import format_classification, format_notes, get_row_style

__all__ = [
    "format_classification",
    "format_notes",
    "get_row_style",
]

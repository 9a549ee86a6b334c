"""Cleanup driver for git-branch-cleaner."""

from .cleaner import BranchCleaner

__all__ = ["BranchCleaner"]

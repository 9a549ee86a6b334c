"""
git-branch-cleaner - delete local branches whose pull requests are all closed
"""

from .__version__ import __version__
from .core import BranchCleaner
from .cli.main import main

__all__ = ["BranchCleaner", "main", "__version__"]

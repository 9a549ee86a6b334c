"""Git and GitHub collaborators for git-branch-cleaner."""

from .operations import GitOperations
from .github import GitHubService, parse_github_url

__all__ = [
    "GitOperations",
    "GitHubService",
    "parse_github_url",
]

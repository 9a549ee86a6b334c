"""Custom exceptions for git-branch-cleaner"""

from typing import Optional


class GitBranchCleanerError(Exception):
    """Base exception for all git-branch-cleaner errors."""
    pass


class GitOperationError(GitBranchCleanerError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class DeleteError(GitOperationError):
    """Exception raised when git refuses to delete a local branch."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("delete_branch", branch, message)


class WrongRemoteCountError(GitOperationError):
    """Exception raised when the remote to compare against is ambiguous."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            "find_remote", message=f"wrong number of remotes: expected 1, have {count}"
        )


class GitHubAPIError(GitBranchCleanerError):
    """Exception raised for errors in GitHub API operations."""

    def __init__(self, operation: str, message: Optional[str] = None, branch: Optional[str] = None):
        self.operation = operation
        self.message = message
        self.branch = branch

        error_msg = f"GitHub API operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class AuthenticationError(GitHubAPIError):
    """Exception raised when GitHub rejects or requires credentials.

    Fatal for the whole run: pushed branches cannot be classified without PR data.
    """


class NetworkError(GitHubAPIError):
    """Exception raised for transient failures talking to GitHub."""


class RateLimitError(NetworkError):
    """Exception raised when the GitHub API rate limit is exhausted."""


class RemoteUrlNotGitHubError(GitHubAPIError):
    """Exception raised when the remote URL does not point at GitHub."""

    def __init__(self, url: str):
        self.url = url
        super().__init__("parse_remote_url", f"remote url not recognized as github: {url}")

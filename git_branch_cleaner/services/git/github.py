"""GitHub API integration service"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING, Union
from urllib.parse import urlparse

import requests
from github import (
    Auth,
    BadCredentialsException,
    Github,
    GithubException,
    RateLimitExceededException,
)

from git_branch_cleaner.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    NetworkError,
    RateLimitError,
    RemoteUrlNotGitHubError,
)
from git_branch_cleaner.models.branch import PullRequestState
from git_branch_cleaner.utils.logging import get_logger
from git_branch_cleaner.utils.threading import get_api_worker_count

if TYPE_CHECKING:
    from github.Repository import Repository
    from git_branch_cleaner.config import Config

logger = get_logger(__name__)

PullRequestResult = Union[List[PullRequestState], GitHubAPIError]


def parse_github_url(remote_url: str) -> Tuple[str, str]:
    """Split a GitHub remote URL into (owner, repo).

    Handles git@github.com:org/repo.git and https://github.com/org/repo(.git).
    """
    if remote_url.startswith("git@github.com:"):
        path = remote_url.split("github.com:", 1)[1]
    else:
        parsed_url = urlparse(remote_url)
        if parsed_url.hostname != "github.com":
            raise RemoteUrlNotGitHubError(remote_url)
        path = parsed_url.path

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[:-4]

    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise RemoteUrlNotGitHubError(remote_url)

    return parts[0], parts[1]


def translate_github_error(
    error: Exception, operation: str, branch: Optional[str] = None
) -> GitHubAPIError:
    """Map a PyGithub or requests exception onto our error hierarchy."""
    if isinstance(error, RateLimitExceededException):
        return RateLimitError(operation, "API rate limit exceeded", branch=branch)
    if isinstance(error, BadCredentialsException):
        return AuthenticationError(operation, "bad credentials", branch=branch)
    if isinstance(error, GithubException):
        if error.status == 401:
            return AuthenticationError(operation, "authentication required", branch=branch)
        if error.status == 403:
            return AuthenticationError(operation, "access forbidden", branch=branch)
        return NetworkError(operation, f"HTTP {error.status}", branch=branch)
    if isinstance(error, requests.exceptions.RequestException):
        return NetworkError(operation, str(error), branch=branch)
    return GitHubAPIError(operation, str(error), branch=branch)


class GitHubService:
    """Hosting API client: looks up the pull requests opened from a branch."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        The token comes from config, falling back to GITHUB_TOKEN. Without one
        the API is used anonymously, which only works for public repositories.
        """
        self.repo_path = repo_path
        self.config = config
        self.debug_mode = config.get("debug", False)
        self.sequential = config.get("sequential", False)
        self.workers = config.get("workers")
        self.github_token = config.get("github_token") or os.environ.get("GITHUB_TOKEN")
        self.github_api_url: Optional[str] = config.get("github_api_url")
        self.github_repo: Optional[str] = None
        self.github: Optional[Github] = None
        self.gh_repo: Optional["Repository"] = None

    @property
    def owner(self) -> str:
        assert self.github_repo is not None, "setup_github_api must be called first"
        return self.github_repo.split("/")[0]

    def _build_client(self) -> Github:
        """Create the PyGithub client.

        Retries are disabled: PyGithub's default policy sleeps until the rate
        limit resets, up to ten times per request. Rate limits must surface as
        RateLimitExceededException so the branch is reported and the run moves on.
        """
        kwargs = {"retry": None}
        if self.github_api_url:
            kwargs["base_url"] = self.github_api_url
        if self.github_token:
            kwargs["auth"] = Auth.Token(self.github_token)
        else:
            logger.warning("[GitHub] No token found, using anonymous API access")
        return Github(**kwargs)

    def setup_github_api(self, remote_url: str) -> None:
        """Setup GitHub API access for the repository behind remote_url.

        Raises:
            RemoteUrlNotGitHubError: remote is not hosted on GitHub
            AuthenticationError: credentials missing or rejected
            NetworkError: GitHub could not be reached
        """
        owner, name = parse_github_url(remote_url)
        self.github_repo = f"{owner}/{name}"
        self.github = self._build_client()

        try:
            self.gh_repo = self.github.get_repo(self.github_repo)
        except (GithubException, requests.exceptions.RequestException) as e:
            error = translate_github_error(e, "get_repo")
            if isinstance(e, GithubException) and e.status == 404:
                # GitHub answers 404 for private repositories it won't show us
                error = AuthenticationError(
                    "get_repo", f"repository {self.github_repo} not found or not accessible"
                )
            raise error from e

        logger.debug(f"[GitHub] GitHub integration enabled for: {self.github_repo}")

    def pull_requests_for_branch(self, branch_name: str) -> List[PullRequestState]:
        """States of every pull request whose head is branch_name, across all pages."""
        assert self.gh_repo is not None, "setup_github_api must be called first"

        try:
            pulls = self.gh_repo.get_pulls(state="all", head=f"{self.owner}:{branch_name}")
            states = [PullRequestState.from_api(pr.state) for pr in pulls]
        except (GithubException, requests.exceptions.RequestException) as e:
            raise translate_github_error(e, "get_pulls", branch_name) from e

        if self.debug_mode:
            open_count = sum(1 for s in states if s is PullRequestState.OPEN)
            logger.debug(
                f"[GitHub] Branch {branch_name} has {len(states)} PR(s), {open_count} open"
            )
        return states

    def _fetch_single_branch_prs(self, branch_name: str) -> Tuple[str, PullRequestResult]:
        """Fetch PR states for one branch; transient errors are returned, not raised."""
        try:
            return branch_name, self.pull_requests_for_branch(branch_name)
        except NetworkError as e:
            logger.warning(f"[GitHub] Could not fetch PRs for {branch_name}: {e}")
            return branch_name, e

    def get_bulk_pull_requests(self, branch_names: List[str]) -> Dict[str, PullRequestResult]:
        """Get PR states for many branches, in parallel unless configured sequential.

        Raises:
            AuthenticationError: fatal, the remaining fetches are abandoned
        """
        if not branch_names:
            return {}

        if self.sequential or self.debug_mode:
            logger.debug(f"[GitHub] Fetching PR data for {len(branch_names)} branches sequentially")
            return dict(self._fetch_single_branch_prs(branch) for branch in branch_names)

        max_workers = min(get_api_worker_count(self.workers), len(branch_names))
        logger.debug(
            f"[GitHub] Fetching PR data for {len(branch_names)} branches using {max_workers} workers"
        )

        result: Dict[str, PullRequestResult] = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_branch = {
                executor.submit(self._fetch_single_branch_prs, branch): branch
                for branch in branch_names
            }
            try:
                for future in as_completed(future_to_branch):
                    branch_name, prs = future.result()
                    result[branch_name] = prs
            except GitHubAPIError:
                for future in future_to_branch:
                    future.cancel()
                raise

        logger.debug(f"[GitHub] Fetched PR data for {len(result)} branches")
        return result

    def close(self) -> None:
        """Close the GitHub API connection to clean up resources."""
        if self.github:
            self.github.close()
            logger.debug("[GitHub] Closed GitHub API connection")

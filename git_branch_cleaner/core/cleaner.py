"""Core functionality for git-branch-cleaner"""

from typing import List, Union

import git

from git_branch_cleaner.config import Config
from git_branch_cleaner.exceptions import DeleteError, GitOperationError
from git_branch_cleaner.models.branch import (
    Branch,
    BranchClassification,
    BranchOutcome,
    CleanupReport,
)
from git_branch_cleaner.services.branch_status_service import classify_branch
from git_branch_cleaner.services.git import GitHubService, GitOperations
from git_branch_cleaner.utils.logging import get_logger

logger = get_logger(__name__)


class BranchCleaner:
    """Deletes local branches whose pull requests are all closed.

    The git and GitHub collaborators are injected so the cleanup logic can run
    against fakes; use from_repo() to wire up the real ones.
    """

    def __init__(self, config: Union[Config, dict], git_service, github_service):
        # Convert dict to Config if needed
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.dry_run = self.config.dry_run
        self.git_service = git_service
        self.github_service = github_service

    @classmethod
    def from_repo(cls, repo_path: str, config: Union[Config, dict]) -> "BranchCleaner":
        """Build a cleaner for the repository at repo_path.

        Raises:
            GitOperationError: not a repository, or no usable remote
            GitHubAPIError: remote not on GitHub, or GitHub rejected us
        """
        if isinstance(config, dict):
            config = Config.from_dict(config)

        try:
            git.Repo(repo_path).close()
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitOperationError("open_repository", message=f"not a git repository: {e}") from e

        git_service = GitOperations(repo_path, config)
        github_service = GitHubService(repo_path, config)

        remote_url = git_service.remote_url()
        logger.debug(f"Setting up GitHub API with remote: {remote_url}")
        github_service.setup_github_api(remote_url)

        return cls(config, git_service, github_service)

    def collect_branches(self) -> List[Branch]:
        """Gather the facts needed to classify every local branch.

        PRs are only looked up for pushed, non-default branches.

        Raises:
            AuthenticationError: GitHub refused the PR lookups
        """
        names = self.git_service.list_local_branches()
        default_branch = self.git_service.default_branch_name()
        logger.info(f"Found {len(names)} local branches, default branch is {default_branch}")

        branches = []
        for name in names:
            is_default = name == default_branch
            is_pushed = self.git_service.is_pushed_to_remote(name)
            branches.append(Branch(name=name, is_default=is_default, is_pushed=is_pushed))

        to_fetch = [b.name for b in branches if b.is_pushed and not b.is_default]
        pr_data = self.github_service.get_bulk_pull_requests(to_fetch)

        for branch in branches:
            if branch.is_default or not branch.is_pushed:
                continue
            prs = pr_data[branch.name]
            if isinstance(prs, Exception):
                branch.fetch_error = prs
            else:
                branch.pull_requests = tuple(prs)

        return branches

    def run(self, branches: List[Branch]) -> CleanupReport:
        """Classify each branch and delete the stale ones, one at a time.

        A failed delete is recorded against the branch and the run carries on.
        """
        report = CleanupReport()

        for branch in branches:
            if branch.fetch_error is not None:
                logger.warning(f"Retaining {branch.name}: PR data unavailable")
                report.record(BranchOutcome(
                    name=branch.name,
                    classification=None,
                    error=branch.fetch_error,
                    dry_run=self.dry_run,
                ))
                continue

            classification = classify_branch(branch)
            outcome = BranchOutcome(
                name=branch.name, classification=classification, dry_run=self.dry_run
            )

            if classification is not BranchClassification.PUSHED_ALL_CLOSED:
                logger.debug(f"Retaining {branch.name} ({classification.value})")
            elif self.dry_run:
                logger.info(f"Would delete {branch.name}: all PRs closed")
            else:
                logger.info(f"Deleting {branch.name}: all PRs closed")
                try:
                    self.git_service.delete_local_branch(branch.name)
                    outcome.deleted = True
                except DeleteError as e:
                    logger.error(f"Failed to delete {branch.name}: {e}")
                    outcome.error = e

            report.record(outcome)

        return report

    def clean(self) -> CleanupReport:
        """Collect, classify and clean up all local branches."""
        return self.run(self.collect_branches())

    def close(self) -> None:
        """Clean up resources."""
        logger.debug("Closing BranchCleaner resources")
        self.github_service.close()

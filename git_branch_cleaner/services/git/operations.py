"""Git operations service"""

from typing import List, Optional, Union, TYPE_CHECKING

import git

from git_branch_cleaner.exceptions import DeleteError, GitOperationError, WrongRemoteCountError
from git_branch_cleaner.utils.logging import get_logger

if TYPE_CHECKING:
    from git_branch_cleaner.config import Config

logger = get_logger(__name__)

# Tried in order when the remote does not advertise a HEAD
FALLBACK_DEFAULT_BRANCHES = ("main", "master")


class GitOperations:
    """Repository client: reads local branches and deletes stale ones."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.force_delete = config.get("force_delete", True)
        self.main_branch: Optional[str] = config.get("main_branch")
        self._remote_name: Optional[str] = config.get("remote_name")
        self._remote_checked = False

        logger.debug(f"Git operations initialized for {repo_path}")

    def _get_repo(self) -> git.Repo:
        """Get a fresh git.Repo instance.

        GitPython repos are lightweight - they don't clone, just open the existing repo.
        """
        return git.Repo(self.repo_path)

    @property
    def remote_name(self) -> str:
        """Name of the remote branches are compared against.

        Uses the configured remote, otherwise the repository must have exactly one.
        """
        if self._remote_checked:
            assert self._remote_name is not None
            return self._remote_name

        repo = self._get_repo()
        if self._remote_name is not None:
            try:
                repo.remote(self._remote_name)
            except ValueError as e:
                raise GitOperationError("find_remote", message=str(e)) from e
        else:
            remotes = repo.remotes
            if len(remotes) != 1:
                raise WrongRemoteCountError(len(remotes))
            self._remote_name = remotes[0].name

        logger.debug(f"Using remote '{self._remote_name}'")
        self._remote_checked = True
        return self._remote_name

    def remote_url(self) -> str:
        """URL of the comparison remote."""
        repo = self._get_repo()
        return repo.remote(self.remote_name).url

    def list_local_branches(self) -> List[str]:
        """Names of all local branches, sorted."""
        repo = self._get_repo()
        return sorted(head.name for head in repo.heads)

    def default_branch_name(self) -> str:
        """Name of the repository's default branch.

        Resolution order: configured main branch, the remote's HEAD,
        then the first of main/master that exists locally.
        """
        if self.main_branch:
            return self.main_branch

        repo = self._get_repo()
        prefix = f"refs/remotes/{self.remote_name}/"
        try:
            target = repo.git.symbolic_ref(f"{prefix}HEAD")
            if target.startswith(prefix):
                name = target[len(prefix):]
                logger.debug(f"Default branch from {self.remote_name}/HEAD: {name}")
                return name
        except git.exc.GitCommandError:
            logger.debug(f"{self.remote_name}/HEAD is not set, falling back to local names")

        local = {head.name for head in repo.heads}
        for candidate in FALLBACK_DEFAULT_BRANCHES:
            if candidate in local:
                logger.debug(f"Default branch by name: {candidate}")
                return candidate

        raise GitOperationError(
            "default_branch",
            message="could not determine the default branch; pass --main-branch",
        )

    def is_pushed_to_remote(self, branch_name: str) -> bool:
        """Check whether a same-named branch exists on the remote."""
        repo = self._get_repo()
        ref = f"refs/remotes/{self.remote_name}/{branch_name}"
        try:
            repo.git.show_ref("--verify", "--quiet", ref)
            return True
        except git.exc.GitCommandError:
            return False

    def delete_local_branch(self, branch_name: str) -> None:
        """Delete a local branch. The remote branch is left alone.

        Raises:
            DeleteError: branch missing, checked out, or refused by git
        """
        repo = self._get_repo()

        if branch_name not in {head.name for head in repo.heads}:
            raise DeleteError(branch_name, "Branch not found")

        # Cannot delete current branch
        if not repo.head.is_detached and repo.active_branch.name == branch_name:
            raise DeleteError(branch_name, "Cannot delete the currently checked out branch")

        try:
            repo.delete_head(branch_name, force=self.force_delete)
        except git.exc.GitCommandError as e:
            message = (e.stderr or str(e)).strip()
            raise DeleteError(branch_name, message) from e

        logger.info(f"Deleted local branch {branch_name}")

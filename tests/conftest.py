"""Pytest fixtures for git-branch-cleaner tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git


def commit_file(repo, name, content, message):
    """Write a file into the working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'dry_run': False,
        'force_delete': True,
        'sequential': True,
        'remote_name': None,
        'main_branch': None,
        'github_token': 'test_token_for_testing',
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a bare 'origin' remote next to it."""
    origin_path = temp_dir / "origin.git"
    git.Repo.init(origin_path, bare=True).close()

    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    repo.create_remote('origin', str(origin_path))
    repo.git.push('origin', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with pushed and local-only branches.

    feature/pushed  - pushed to origin
    feature/local   - never pushed, has a commit not on main
    """
    repo = git_repo

    repo.git.checkout('-b', 'feature/pushed')
    commit_file(repo, "pushed.txt", "Pushed content\n", "Add pushed feature")
    repo.git.push('origin', 'feature/pushed')

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/local')
    commit_file(repo, "local.txt", "Local content\n", "Add local feature")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def mock_git_service():
    """Create a fake repository client backed by Mocks."""
    from git_branch_cleaner.services.git import GitOperations

    service = Mock(spec=GitOperations)
    service.list_local_branches = Mock(return_value=["main"])
    service.default_branch_name = Mock(return_value="main")
    service.is_pushed_to_remote = Mock(return_value=False)
    service.delete_local_branch = Mock(return_value=None)
    return service


@pytest.fixture
def mock_github_service():
    """Create a fake hosting API client that knows about no pull requests."""
    from git_branch_cleaner.services.git import GitHubService

    service = Mock(spec=GitHubService)
    service.get_bulk_pull_requests = Mock(
        side_effect=lambda names: {name: [] for name in names}
    )
    return service


@pytest.fixture
def make_pull():
    """Factory for PyGithub-style pull request objects."""
    def _make_pull(state, merged=False):
        pr = Mock()
        pr.state = state
        pr.merged = merged
        return pr
    return _make_pull

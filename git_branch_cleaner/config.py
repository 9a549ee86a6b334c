"""Configuration handling for git-branch-cleaner"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class Config:
    """Configuration for git-branch-cleaner with validation."""

    # Repository
    remote_name: Optional[str] = None  # None = the repository's only remote
    main_branch: Optional[str] = None  # None = detect from <remote>/HEAD

    # Execution modes
    dry_run: bool = False
    force_delete: bool = True  # git branch -D; False uses -d and keeps unmerged work
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Fetch PR data one branch at a time
    workers: Optional[int] = None  # Number of PR fetch workers (None = auto-detect)

    # GitHub integration
    github_token: Optional[str] = None
    github_api_url: Optional[str] = None  # None = https://api.github.com

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_main_branch()
        self._validate_workers()

    def _validate_remote_name(self):
        """Validate remote_name is not blank when given."""
        if self.remote_name is not None:
            if not self.remote_name.strip():
                raise ValueError("remote_name cannot be empty")
            self.remote_name = self.remote_name.strip()

    def _validate_main_branch(self):
        """Validate main_branch is not blank when given."""
        if self.main_branch is not None:
            if not self.main_branch.strip():
                raise ValueError("main_branch cannot be empty")
            self.main_branch = self.main_branch.strip()

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict:
        """Convert config to a dictionary, with the token redacted."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if data["github_token"]:
            data["github_token"] = "***"
        return data

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

"""Branch model and related enums"""
from collections import Counter
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from git_branch_cleaner.exceptions import GitBranchCleanerError, GitHubAPIError


class PullRequestState(Enum):
    """State of a pull request. Merged pull requests count as closed."""
    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_api(cls, state: str) -> "PullRequestState":
        """Map a GitHub API state string; anything not closed is treated as open."""
        if state and state.lower() == "closed":
            return cls.CLOSED
        return cls.OPEN


class BranchClassification(Enum):
    """Where a local branch stands relative to the remote and its pull requests."""
    DEFAULT = "default"
    UNPUSHED = "unpushed"
    PUSHED_NO_PR = "pushed-no-pr"
    PUSHED_OPEN_PR = "pushed-open-pr"
    PUSHED_ALL_CLOSED = "pushed-all-closed"


@dataclass
class Branch:
    """Observed facts about a local branch."""
    name: str
    is_default: bool
    is_pushed: bool
    pull_requests: Tuple[PullRequestState, ...] = ()
    fetch_error: Optional["GitHubAPIError"] = None  # PR lookup failed, classification unknown


@dataclass
class BranchOutcome:
    """Final disposition of a branch after a cleanup run."""
    name: str
    classification: Optional[BranchClassification]
    deleted: bool = False
    error: Optional["GitBranchCleanerError"] = None
    dry_run: bool = False

    @property
    def disposition(self) -> str:
        if self.error is not None:
            return "error"
        if self.deleted:
            return "deleted"
        if self.dry_run and self.classification == BranchClassification.PUSHED_ALL_CLOSED:
            return "would delete"
        return "retained"


@dataclass
class CleanupReport:
    """Per-branch outcomes of a cleanup run, in processing order."""
    outcomes: Dict[str, BranchOutcome] = field(default_factory=dict)

    def record(self, outcome: BranchOutcome) -> None:
        self.outcomes[outcome.name] = outcome

    def __getitem__(self, name: str) -> BranchOutcome:
        return self.outcomes[name]

    def __contains__(self, name: object) -> bool:
        return name in self.outcomes

    def __iter__(self) -> Iterator[BranchOutcome]:
        return iter(self.outcomes.values())

    def __len__(self) -> int:
        return len(self.outcomes)

    def deleted(self) -> List[BranchOutcome]:
        return [o for o in self if o.deleted]

    def retained(self) -> List[BranchOutcome]:
        return [o for o in self if o.disposition in ("retained", "would delete")]

    def errors(self) -> List[BranchOutcome]:
        return [o for o in self if o.error is not None]

    @property
    def has_errors(self) -> bool:
        return any(o.error is not None for o in self)

    @property
    def exit_code(self) -> int:
        """0 when every branch was processed cleanly, 1 otherwise."""
        return 1 if self.has_errors else 0

    def summary(self) -> Dict[str, int]:
        """Count branches per classification ("unknown" when PR data was missing)."""
        counts = Counter(
            o.classification.value if o.classification else "unknown" for o in self
        )
        return dict(counts)

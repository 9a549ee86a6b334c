"""Service for classifying branches against their remote and pull requests"""

from git_branch_cleaner.models.branch import Branch, BranchClassification, PullRequestState


def classify_branch(branch: Branch) -> BranchClassification:
    """Classify a branch. First match wins:

      1. The default branch.
      2. Not pushed to the remote.
      3. Pushed, but no PRs were ever opened from it.
      4. Pushed, and at least one PR is still open.
      5. Pushed, and every PR is closed (merged counts as closed).

    Branches in states 1-4 are still in development and are kept. State 5 is
    no longer relevant and is the only one eligible for deletion.
    """
    if branch.is_default:
        return BranchClassification.DEFAULT

    if not branch.is_pushed:
        return BranchClassification.UNPUSHED

    if not branch.pull_requests:
        return BranchClassification.PUSHED_NO_PR

    if any(pr is PullRequestState.OPEN for pr in branch.pull_requests):
        return BranchClassification.PUSHED_OPEN_PR

    return BranchClassification.PUSHED_ALL_CLOSED


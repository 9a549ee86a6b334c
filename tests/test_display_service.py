"""Tests for DisplayService"""
from rich.console import Console

from git_branch_cleaner.constants import COLUMNS
from git_branch_cleaner.exceptions import NetworkError
from git_branch_cleaner.models.branch import BranchClassification, BranchOutcome, CleanupReport
from git_branch_cleaner.services.display_service import DisplayService


def render(report, verbose=False):
    console = Console(record=True, width=160)
    DisplayService(console, verbose=verbose).display_report(report)
    return console.export_text()


class TestDisplayReport:
    """Test report rendering."""

    def test_empty_report(self):
        """Test a repository without branches says so."""
        assert "No local branches found" in render(CleanupReport())

    def test_rows_and_summary(self):
        """Test every branch appears with its state and action."""
        report = CleanupReport()
        report.record(BranchOutcome("main", BranchClassification.DEFAULT))
        report.record(BranchOutcome("feature/w", BranchClassification.PUSHED_ALL_CLOSED, deleted=True))
        report.record(BranchOutcome(
            "feature/flaky", None, error=NetworkError("get_pulls", "HTTP 502", branch="feature/flaky")
        ))

        output = render(report, verbose=True)

        assert "feature/w" in output
        assert "all PRs closed" in output
        assert "deleted" in output
        assert "unknown" in output
        assert "Total branches: 3" in output
        assert "Deleted branches: 1" in output
        assert "1 branches had errors" in output
        assert "HTTP 502" in output

    def test_dry_run_summary(self):
        """Test dry run reports what would be deleted."""
        report = CleanupReport()
        report.record(BranchOutcome(
            "feature/w", BranchClassification.PUSHED_ALL_CLOSED, dry_run=True
        ))

        output = render(report)

        assert "would delete" in output
        assert "Would delete 1 branches (dry run)" in output

    def test_nothing_to_clean(self):
        """Test a clean repository gets a friendly message."""
        report = CleanupReport()
        report.record(BranchOutcome("feature/z", BranchClassification.PUSHED_OPEN_PR))

        assert "Nothing to clean up!" in render(report)

    def test_markup_in_branch_name_is_literal(self):
        """Test branch names are not interpreted as rich markup."""
        report = CleanupReport()
        report.record(BranchOutcome("fix/[bold]thing", BranchClassification.UNPUSHED))

        assert "fix/[bold]thing" in render(report)

    def test_column_headers(self):
        """Test the table carries every configured column header."""
        report = CleanupReport()
        report.record(BranchOutcome("feature/z", BranchClassification.PUSHED_NO_PR))

        output = render(report)

        for col in COLUMNS:
            assert col.label in output

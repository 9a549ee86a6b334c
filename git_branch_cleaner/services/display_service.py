"""Display service for cleanup reports"""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_branch_cleaner.constants import COLUMNS
from git_branch_cleaner.formatters import format_classification, format_notes, get_row_style
from git_branch_cleaner.models.branch import CleanupReport


class DisplayService:
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def display_report(self, report: CleanupReport) -> None:
        """Print one row per branch with its state and what happened to it."""
        if not len(report):
            self.console.print("No local branches found")
            return

        table = Table()
        for col in COLUMNS:
            table.add_column(col.label, min_width=col.width or None)

        for outcome in report:
            table.add_row(
                escape(outcome.name),
                format_classification(outcome.classification),
                outcome.disposition,
                escape(format_notes(outcome)),
                style=get_row_style(outcome),
            )

        self.console.print(table)
        self.display_summary(report)

    def display_summary(self, report: CleanupReport) -> None:
        deleted = report.deleted()
        would_delete = [o for o in report if o.disposition == "would delete"]
        errors = report.errors()

        self.console.print("\nSummary:")
        self.console.print(f"Total branches: {len(report)}")
        if self.verbose:
            for state, count in sorted(report.summary().items()):
                self.console.print(f"  {state}: {count}")
        if would_delete:
            self.console.print(f"[yellow]Would delete {len(would_delete)} branches (dry run)[/yellow]")
        else:
            self.console.print(f"Deleted branches: {len(deleted)}")

        if errors:
            self.console.print(f"\n[red]{len(errors)} branches had errors:[/red]")
            for outcome in errors:
                self.console.print(
                    f"[red]  • {escape(outcome.name)}: {escape(str(outcome.error))}[/red]"
                )
        elif not deleted and not would_delete:
            self.console.print("[green]Nothing to clean up![/green]")

"""Command-line interface for git-branch-cleaner"""

import sys
from rich.console import Console

from git_branch_cleaner.cli.args import parse_args
from git_branch_cleaner.config import Config
from git_branch_cleaner.core import BranchCleaner
from git_branch_cleaner.exceptions import GitBranchCleanerError
from git_branch_cleaner.services.display_service import DisplayService
from git_branch_cleaner.utils.logging import setup_logging
from git_branch_cleaner.utils.threading import get_threading_info

console = Console()


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    cleaner = None
    try:
        config = Config(
            remote_name=parsed_args.remote,
            main_branch=parsed_args.main_branch,
            dry_run=parsed_args.dry_run,
            force_delete=not parsed_args.safe_delete,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            sequential=parsed_args.sequential,
            workers=parsed_args.workers,
            github_token=parsed_args.personal_access_token,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")

            threading_info = get_threading_info()
            console.print("[yellow]Threading Information:[/yellow]")
            console.print(f"  Python version: {threading_info['python_version']}")
            console.print(f"  Threading mode: {threading_info['mode']}")
            console.print(f"  API workers: {threading_info['api_workers']}")

            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")
            console.print("[dim]Note: Debug mode fetches pull requests sequentially[/dim]")

        cleaner = BranchCleaner.from_repo(parsed_args.path, config)
        report = cleaner.clean()

        DisplayService(console, verbose=parsed_args.verbose).display_report(report)
        return report.exit_code
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (GitBranchCleanerError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1
    finally:
        if cleaner is not None:
            cleaner.close()


if __name__ == "__main__":
    sys.exit(main())

"""Command-line argument parsing for git-branch-cleaner."""

import argparse
from git_branch_cleaner.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-branch-cleaner",
        description="Clean outdated local git branches. Removes local branches which have "
        "been pushed to the remote, have at least one pull request, and whose pull "
        "requests are all closed.",
        epilog="Authentication: pass --personal-access-token or set GITHUB_TOKEN. "
        "Get a token at https://github.com/settings/tokens (scopes: repo)",
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="Path to the repository to clean (default: .)"
    )
    parser.add_argument(
        "-T",
        "--personal-access-token",
        metavar="TOKEN",
        help="GitHub personal access token (default: $GITHUB_TOKEN)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be deleted without actually deleting",
    )
    parser.add_argument("--remote", help="Remote to compare against (default: the only remote)")
    parser.add_argument(
        "--main-branch", help="Default branch name (default: detected from the remote HEAD)"
    )
    parser.add_argument(
        "--safe-delete",
        action="store_true",
        help="Use 'git branch -d', refusing to delete branches with unmerged commits",
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for fetching pull requests (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Fetch pull requests one branch at a time",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-branch-cleaner {__version__}")

    return parser.parse_args(argv)

"""CLI entry point for issuelink."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="issuelink",
        description="Create or update the GitHub issue for a markdown task file",
    )
    parser.add_argument(
        "task_file",
        type=Path,
        help="Markdown task file to push",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing issuelink.yml (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be sent without creating or updating the issue",
    )
    parser.add_argument(
        "--linkify",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Rewrite the task title into a link to the issue (default: from issuelink.yml)",
    )
    parser.add_argument(
        "--assign",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Assign the issue to the authenticated user (default: from issuelink.yml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    from .cli.push import run_push

    exit_code = run_push(
        settings.project_root,
        args.task_file,
        token=settings.token,
        dry_run=args.dry_run,
        linkify=args.linkify,
        assign=args.assign,
    )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()

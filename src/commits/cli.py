#!/usr/bin/env python3
"""CLI interface for commits module."""

import argparse
import json
import sys
from pathlib import Path

from common.env import env
from common.logger import error, progress, setup_logging
from repo import GitError, file_system

from .filters import (
    not_authored_by_emails,
    not_authored_by_names,
    since,
    with_max_parents,
)
from .models import Commit, CommitSource
from .sources import fake_commit, in_repo
from .types import CommitError


def build_source(args) -> CommitSource:
    """Compose the base history source with the filters requested in ``args``.

    Options left unset on the command line fall back to the environment.
    """
    source = in_repo(file_system(args.repo or env.repo_dir()))

    since_date = args.since or env.since()
    if since_date:
        source = since(since_date, source)

    names = args.ignore_name or env.ignore_author_names()
    if names:
        source = not_authored_by_names(names, source)

    emails = args.ignore_email or env.ignore_author_emails()
    if emails:
        source = not_authored_by_emails(emails, source)

    max_parents = args.max_parents if args.max_parents is not None else env.max_parents()
    if max_parents is not None:
        source = with_max_parents(max_parents, source)

    return source


def _describe(commit: Commit) -> str:
    author = commit.author.name if commit.author else "-"
    return f"{commit.short_id}  {commit.date:%Y-%m-%d}  {author}  {commit.subject}"


def cmd_log(args):
    """List the commits that survive the requested filters.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        commits = build_source(args)()
    except (GitError, CommitError, ValueError) as e:
        # ValueError covers malformed COMMITS_* settings
        error(str(e))
        return 1

    if args.format == "json":
        print(json.dumps([c.to_dict() for c in commits], indent=2))
    else:
        for commit in commits:
            progress(_describe(commit))
    return 0


def cmd_message(args):
    """Parse a not-yet-committed message the way history commits are parsed.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        if args.file:
            with open(args.file, "rb") as stream:
                (commit,) = fake_commit(stream)()
        else:
            (commit,) = fake_commit(sys.stdin.buffer)()
    except (OSError, CommitError) as e:
        error(str(e))
        return 1

    progress(f"subject: {commit.subject}")
    progress(f"body: {commit.body}")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Read and filter a repository's commits")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING, LOG_LEVEL overrides)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Log command
    log_parser = subparsers.add_parser("log", help="List commits reachable from HEAD")
    log_parser.add_argument(
        "--repo",
        type=Path,
        default=None,
        help="Repository directory (default: COMMITS_REPO_DIR or current directory)",
    )
    log_parser.add_argument(
        "--since",
        default=None,
        help="Only commits dated on or after this YYYY-MM-DD date (UTC)",
    )
    log_parser.add_argument(
        "--max-parents",
        type=int,
        default=None,
        help="Only commits with at most this many parents (1 drops merges)",
    )
    log_parser.add_argument(
        "--ignore-name",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Drop commits whose author name matches this regex (repeatable)",
    )
    log_parser.add_argument(
        "--ignore-email",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Drop commits whose author email matches this regex (repeatable)",
    )
    log_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    log_parser.set_defaults(func=cmd_log)

    # Message command
    message_parser = subparsers.add_parser(
        "message", help="Parse a commit message from a file or stdin"
    )
    message_parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="Message file, e.g. .git/COMMIT_EDITMSG (default: stdin)",
    )
    message_parser.set_defaults(func=cmd_message)

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    exit(main())

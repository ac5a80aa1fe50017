"""Shared fixtures: throwaway git repositories and logging state."""

import logging
import os
import subprocess
import uuid
from pathlib import Path

import pytest

from common import logger as logger_module


def git(repo_path: Path, *args: str, env: dict | None = None) -> str:
    """Run git in ``repo_path`` and return stdout."""
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
        env={**os.environ, **(env or {})},
    )
    return result.stdout


def git_commit(
    repo_path: Path,
    message: str,
    *,
    author: tuple[str, str] = ("Test User", "test@example.com"),
    date: str | None = None,
) -> str:
    """Write a file, commit it, and return the new commit hash.

    Args:
        repo_path: Repository to commit in
        message: Commit message
        author: (name, email) recorded as the commit author
        date: Author date in a format git accepts, e.g. "2020-01-02T12:00:00+00:00"
    """
    (repo_path / f"{uuid.uuid4().hex}.txt").write_text(message)
    git(repo_path, "add", ".")

    env = {"GIT_AUTHOR_NAME": author[0], "GIT_AUTHOR_EMAIL": author[1]}
    if date:
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
    git(repo_path, "commit", "-m", message, env=env)
    return git(repo_path, "rev-parse", "HEAD").strip()


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create an empty git repository with user identity configured.
    Returns the repo path.
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "user.email", "test@example.com")

    return repo_path


@pytest.fixture
def repo_with_history(temp_git_repo):
    """
    Repository whose history includes a merge of a side branch.

    History, newest first:
        Merge branch 'feature'   2020-01-05, 2 parents
        subject3                 2020-01-04
        feature work             2020-01-03, by Bot Account on branch feature
        subject2                 2020-01-02
        subject1                 2020-01-01
    """
    repo_path = temp_git_repo
    git_commit(repo_path, "subject1\n\nbody1", date="2020-01-01T12:00:00+00:00")
    git_commit(repo_path, "subject2\n\nbody2", date="2020-01-02T12:00:00+00:00")

    main_branch = git(repo_path, "rev-parse", "--abbrev-ref", "HEAD").strip()
    git(repo_path, "checkout", "-b", "feature")
    git_commit(
        repo_path,
        "feature work",
        author=("Bot Account", "bot@example.com"),
        date="2020-01-03T12:00:00+00:00",
    )
    git(repo_path, "checkout", main_branch)
    git_commit(repo_path, "subject3\n\nbody3", date="2020-01-04T12:00:00+00:00")
    merge_date = "2020-01-05T12:00:00+00:00"
    git(
        repo_path,
        "merge",
        "--no-ff",
        "--no-edit",
        "-m",
        "Merge branch 'feature'",
        "feature",
        env={"GIT_AUTHOR_DATE": merge_date, "GIT_COMMITTER_DATE": merge_date},
    )
    return repo_path


@pytest.fixture
def restore_logging():
    """Undo root and module logger changes made by setup_logging()."""
    loggers = [logging.getLogger()] + [
        logging.getLogger(name) for name in logger_module._module_loggers
    ]
    saved = [(lg, lg.level, list(lg.handlers)) for lg in loggers]
    yield
    for lg, level, handlers in saved:
        for handler in lg.handlers:
            if handler not in handlers and isinstance(handler, logging.FileHandler):
                handler.close()
        lg.handlers[:] = handlers
        lg.setLevel(level)

"""Thin wrappers around git commands."""

import os
import subprocess
from pathlib import Path
from typing import Iterable

from common.env import env
from common.logger import get_logger

from .types import GitError

logger = get_logger(__name__)

# Variables that point git at a repository other than the one in cwd
REPOSITORY_ENV_VARS = frozenset(
    {
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_INDEX_FILE",
        "GIT_COMMON_DIR",
        "GIT_OBJECT_DIRECTORY",
        "GIT_ALTERNATE_OBJECT_DIRECTORIES",
        "GIT_NAMESPACE",
        "GIT_PREFIX",
    }
)


def git_environment() -> dict[str, str]:
    """Return the caller's environment without repository-locating GIT_* variables."""
    return {k: v for k, v in os.environ.items() if k not in REPOSITORY_ENV_VARS}


def run_git(args: Iterable[str], *, cwd: Path, timeout: float | None = None) -> str:
    """Run a git sub-command and return its stdout.

    The repository is always located from ``cwd``; GIT_DIR and friends set by
    an enclosing hook are ignored.

    Args:
        args: Sub-command and its arguments, without the git executable
        cwd: Directory to run git in
        timeout: Seconds before the command is abandoned. Defaults to the
            configured COMMITS_GIT_TIMEOUT.

    Returns:
        Raw stdout, decoded as UTF-8

    Raises:
        GitError: If the timeout is misconfigured, or git is missing, times
            out, or exits non-zero
    """
    args = list(args)
    command = [env.git_binary(), *args]
    if timeout is None:
        try:
            timeout = env.git_timeout()
        except ValueError as e:
            raise GitError(str(e)) from e

    logger.debug(f"Running {' '.join(command)} in {cwd}")
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd),
            check=False,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            env=git_environment(),
        )
    except FileNotFoundError as e:
        raise GitError(f"git executable not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {' '.join(args)} timed out after {timeout}s") from e

    if completed.returncode != 0:
        raise GitError(completed.stderr.strip() or "git command failed")
    return completed.stdout

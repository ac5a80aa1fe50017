"""Environment configuration for commit sources.

All environment variable access goes through this module. Values are read on
every call so tests can monkeypatch the environment freely.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _split_patterns(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def repo_dir() -> Path:
        """Get the repository whose history is read.

        Returns:
            Repository path, defaults to the current directory
        """
        return Path(os.getenv("COMMITS_REPO_DIR", "."))

    @staticmethod
    def git_binary() -> str:
        """Get the git executable used for all history reads.

        Returns:
            Executable name or path, defaults to 'git'
        """
        return os.getenv("COMMITS_GIT_BINARY", "git")

    @staticmethod
    def git_timeout() -> float | None:
        """Get the timeout for a single git invocation.

        Returns:
            Timeout in seconds, or None to wait indefinitely

        Raises:
            ValueError: If the variable is not a positive number
        """
        raw = os.getenv("COMMITS_GIT_TIMEOUT")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            raise ValueError(f"COMMITS_GIT_TIMEOUT must be a number of seconds, got {raw!r}") from None
        if timeout <= 0:
            raise ValueError(f"COMMITS_GIT_TIMEOUT must be positive, got {raw!r}")
        return timeout

    @staticmethod
    def since() -> str | None:
        """Get the default date cutoff (YYYY-MM-DD)."""
        return os.getenv("COMMITS_SINCE") or None

    @staticmethod
    def max_parents() -> int | None:
        """Get the default parent-count ceiling.

        Returns:
            Maximum number of parents, or None for no ceiling

        Raises:
            ValueError: If the variable is not an integer
        """
        raw = os.getenv("COMMITS_MAX_PARENTS")
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"COMMITS_MAX_PARENTS must be an integer, got {raw!r}") from None

    @staticmethod
    def ignore_author_names() -> list[str]:
        """Get author name patterns to exclude, from a comma separated list."""
        return _split_patterns(os.getenv("COMMITS_IGNORE_AUTHOR_NAMES"))

    @staticmethod
    def ignore_author_emails() -> list[str]:
        """Get author email patterns to exclude, from a comma separated list."""
        return _split_patterns(os.getenv("COMMITS_IGNORE_AUTHOR_EMAILS"))


# Singleton instance for convenient access
env = Environment()

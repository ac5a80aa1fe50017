"""Records and exceptions for the repository layer."""

from dataclasses import dataclass
from datetime import datetime


class GitError(RuntimeError):
    """Raised when a git command fails."""

    pass


class RepositoryOpenError(GitError):
    """Location is missing, corrupt, or not a git repository."""

    pass


class NoHeadError(GitError):
    """HEAD does not resolve to a commit (e.g. an empty repository)."""

    pass


class LogTraversalError(GitError):
    """Walking the commit history failed."""

    pass


@dataclass(frozen=True)
class Signature:
    """Author identity and timestamp of a commit."""

    name: str
    email: str
    when: datetime


@dataclass(frozen=True)
class RawCommit:
    """One commit exactly as read from git log."""

    hash: str
    message: str
    author: Signature
    parent_hashes: tuple[str, ...]

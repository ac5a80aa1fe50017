"""Deferred, composable sources of repository commits."""

from .filters import (
    filtered,
    not_authored_by_emails,
    not_authored_by_names,
    since,
    with_max_parents,
)
from .models import Author, Commit, CommitSource
from .sources import fake_commit, in_repo
from .types import (
    CommitError,
    DateFormatError,
    InvalidPatternError,
    ShortHashError,
    StreamReadError,
)

__all__ = [
    "Author",
    "Commit",
    "CommitError",
    "CommitSource",
    "DateFormatError",
    "InvalidPatternError",
    "ShortHashError",
    "StreamReadError",
    "fake_commit",
    "filtered",
    "in_repo",
    "not_authored_by_emails",
    "not_authored_by_names",
    "since",
    "with_max_parents",
]

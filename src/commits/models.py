"""Data models for commits."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Callable

from common.constants import SHORT_HASH_LENGTH

from .types import ShortHashError


@dataclass(frozen=True)
class Author:
    """Name and email of whoever wrote a commit."""

    name: str
    email: str


@dataclass(frozen=True)
class Commit:
    """A single historical revision."""

    hash: str
    message: str
    date: datetime
    num_parents: int = 0
    author: Author | None = None  # None for commits built from ad-hoc text

    @property
    def id(self) -> str:
        """Full commit hash."""
        return self.hash

    @property
    def short_id(self) -> str:
        """First seven characters of the hash.

        Raises:
            ShortHashError: If the hash is shorter than seven characters
        """
        if len(self.hash) < SHORT_HASH_LENGTH:
            raise ShortHashError(
                f"Hash {self.hash!r} is shorter than {SHORT_HASH_LENGTH} characters"
            )
        return self.hash[:SHORT_HASH_LENGTH]

    @property
    def subject(self) -> str:
        """Message text before the first line break."""
        return self.message.split("\n", 1)[0]

    @property
    def body(self) -> str:
        """Message text after the first blank line.

        Blank lines between later paragraphs are kept, so
        ``subject + "\\n\\n" + body`` reproduces a well-formed message.
        """
        parts = self.message.split("\n\n", 1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def is_merge(self) -> bool:
        """Check if the commit has more than one parent."""
        return self.num_parents > 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data


# A deferred, repeatable computation producing commits newest first
CommitSource = Callable[[], list[Commit]]

"""Commit sources: deferred producers of commit lists.

A source is a zero-argument callable. Building one does no work; calling it
reads history (or a message stream) and returns the commits, newest first.
Sources are re-executable and keep no state between calls.

    source = in_repo(file_system("."))
    commits = source()
"""

from datetime import datetime
from typing import IO

from common.constants import FAKE_SHA
from common.logger import get_logger
from repo import RawCommit, RepositoryProvider

from .models import Author, Commit, CommitSource
from .types import StreamReadError

logger = get_logger(__name__)


def _from_raw(raw: RawCommit) -> Commit:
    return Commit(
        hash=raw.hash,
        message=raw.message,
        date=raw.author.when,
        num_parents=len(raw.parent_hashes),
        author=Author(name=raw.author.name, email=raw.author.email),
    )


def in_repo(provider: RepositoryProvider) -> CommitSource:
    """Build a source over the full history reachable from HEAD.

    Each call opens the repository, resolves HEAD and walks the log again.

    Args:
        provider: Callable returning an opened repository

    Returns:
        Source whose calls raise RepositoryOpenError, NoHeadError or
        LogTraversalError when the corresponding step fails. An empty
        repository raises NoHeadError.
    """

    def source() -> list[Commit]:
        repository = provider()
        head = repository.head()
        logger.debug(f"Walking history of {repository.path} from {head[:12]}")
        return [_from_raw(raw) for raw in repository.log(head)]

    return source


def fake_commit(stream: IO) -> CommitSource:
    """Build a source yielding one commit made from an ad-hoc message.

    Used to run text that is not committed yet (a commit-msg hook file,
    stdin) through the same pipeline as real history. The stream is read in
    full on each call; bytes are decoded as UTF-8.

    Args:
        stream: Readable text or binary stream holding the message

    Returns:
        Source returning a single authorless commit with hash 'fakesha',
        no parents, and the current time as its date
    """

    def source() -> list[Commit]:
        try:
            content = stream.read()
            message = content.decode("utf-8") if isinstance(content, bytes) else content
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(f"Could not read commit message: {e}") from e

        return [
            Commit(
                hash=FAKE_SHA,
                message=message,
                date=datetime.now().astimezone(),
                num_parents=0,
                author=None,
            )
        ]

    return source

"""Repository handles backed by the git command line.

A provider is a zero-argument callable that opens a repository on demand:

    provider = file_system("path/to/repo")
    repository = provider()
    head = repository.head()
    history = repository.log(head)
"""

from datetime import datetime
from pathlib import Path
from typing import Callable

from common.constants import FIELD_SEP
from common.logger import get_logger

from .git_tools import run_git
from .types import (
    GitError,
    LogTraversalError,
    NoHeadError,
    RawCommit,
    RepositoryOpenError,
    Signature,
)

logger = get_logger(__name__)

# hash, author name, author email, author date (strict ISO 8601), parents, raw body
LOG_FORMAT = FIELD_SEP.join(["%H", "%an", "%ae", "%aI", "%P", "%B"])


class Repository:
    """Handle to a git repository on the local filesystem."""

    def __init__(self, path: Path):
        self.path = path

    @classmethod
    def open(cls, location: str | Path) -> "Repository":
        """Open the repository rooted at ``location``.

        Both work tree roots and bare repositories are accepted. A directory
        nested inside some other repository's work tree is not.

        Raises:
            RepositoryOpenError: If the location is missing, not a repository
                root, or git cannot read it
        """
        path = Path(location).expanduser().resolve()
        if not path.is_dir():
            raise RepositoryOpenError(f"{path} is not a directory")

        try:
            is_bare = run_git(["rev-parse", "--is-bare-repository"], cwd=path).strip()
            if is_bare == "true":
                root = run_git(["rev-parse", "--absolute-git-dir"], cwd=path).strip()
            else:
                root = run_git(["rev-parse", "--show-toplevel"], cwd=path).strip()
        except GitError as e:
            raise RepositoryOpenError(f"{path} is not a git repository: {e}") from e

        if Path(root).resolve() != path:
            raise RepositoryOpenError(f"{path} is not a git repository root")

        logger.debug(f"Opened repository at {path}")
        return cls(path)

    def head(self) -> str:
        """Resolve HEAD to a full commit hash.

        Raises:
            NoHeadError: If HEAD does not point at a commit yet
        """
        try:
            return run_git(
                ["rev-parse", "--verify", "--quiet", "HEAD^{commit}"], cwd=self.path
            ).strip()
        except GitError as e:
            raise NoHeadError(f"{self.path} has no HEAD commit") from e

    def log(self, from_ref: str) -> list[RawCommit]:
        """Return every commit reachable from ``from_ref``, newest first.

        Raises:
            LogTraversalError: If git fails or the output cannot be parsed
        """
        try:
            output = run_git(
                [
                    "-c",
                    "log.showSignature=false",
                    "log",
                    "-z",
                    "--no-color",
                    f"--format={LOG_FORMAT}",
                    from_ref,
                    "--",
                ],
                cwd=self.path,
            )
        except GitError as e:
            raise LogTraversalError(f"Could not walk history from {from_ref}: {e}") from e

        commits = [_parse_record(record) for record in output.split("\0") if record]
        logger.debug(f"Read {len(commits)} commits from {self.path}")
        return commits

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"


def _parse_record(record: str) -> RawCommit:
    parts = record.split(FIELD_SEP, 5)
    if len(parts) != 6:
        raise LogTraversalError(f"Malformed git log record: {record[:80]!r}")

    commit_hash, name, email, date, parents, message = parts
    try:
        when = datetime.fromisoformat(date)
    except ValueError as e:
        raise LogTraversalError(f"Bad author date {date!r} on {commit_hash}") from e

    return RawCommit(
        hash=commit_hash,
        message=message,
        author=Signature(name=name, email=email, when=when),
        parent_hashes=tuple(parents.split()),
    )


RepositoryProvider = Callable[[], Repository]


def file_system(directory: str | Path) -> RepositoryProvider:
    """Return a provider that opens the repository at ``directory`` on each call."""

    def provide() -> Repository:
        return Repository.open(directory)

    return provide

"""Filter combinators over commit sources.

Every filter wraps an existing source and returns a new one. The wrapped
source is only called when the filter is, any exception it raises
propagates untouched, and surviving commits keep their original order.

    source = with_max_parents(
        1,
        not_authored_by_emails([r"\\[bot\\]@"], since("2024-01-01", in_repo(provider))),
    )

Arguments are validated when the filter is built, so a malformed pipeline
fails before any history is read.
"""

import re
from datetime import datetime, timezone
from typing import Callable, Iterable

from common.constants import DATE_FORMAT
from common.logger import get_logger

from .models import Commit, CommitSource
from .types import DateFormatError, InvalidPatternError

logger = get_logger(__name__)

Predicate = Callable[[Commit], bool]


def filtered(predicate: Predicate, source: CommitSource) -> CommitSource:
    """Keep only the commits of ``source`` for which ``predicate`` holds."""

    def filtered_source() -> list[Commit]:
        commits = source()
        kept = [commit for commit in commits if predicate(commit)]
        logger.debug(f"Kept {len(kept)} of {len(commits)} commits")
        return kept

    return filtered_source


def parse_date(date_text: str) -> datetime:
    """Parse a YYYY-MM-DD literal as midnight UTC.

    Raises:
        DateFormatError: If the text is not a valid YYYY-MM-DD date
    """
    try:
        parsed = datetime.strptime(date_text, DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise DateFormatError(f"Expected a YYYY-MM-DD date, got {date_text!r}") from e
    # strptime accepts unpadded fields like 2020-1-2
    if parsed.strftime(DATE_FORMAT) != date_text:
        raise DateFormatError(f"Expected a YYYY-MM-DD date, got {date_text!r}")
    return parsed.replace(tzinfo=timezone.utc)


def _aware(moment: datetime) -> datetime:
    # Naive dates are taken to be UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def since(date_text: str, source: CommitSource) -> CommitSource:
    """Keep commits dated on or after ``date_text`` (midnight UTC, inclusive).

    Raises:
        DateFormatError: If ``date_text`` is not a YYYY-MM-DD date
    """
    start = parse_date(date_text)
    return filtered(lambda commit: _aware(commit.date) >= start, source)


def _compile(patterns: Iterable[str]) -> list[re.Pattern]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(f"Invalid pattern {pattern!r}: {e}") from e
    return compiled


def _not_authored_by(
    field: Callable[[Commit], str], patterns: Iterable[str], source: CommitSource
) -> CommitSource:
    compiled = _compile(patterns)

    def keep(commit: Commit) -> bool:
        if commit.author is None:
            return True
        value = field(commit)
        return not any(pattern.search(value) for pattern in compiled)

    return filtered(keep, source)


def not_authored_by_names(patterns: Iterable[str], source: CommitSource) -> CommitSource:
    """Drop commits whose author name matches any of ``patterns``.

    Patterns are case-sensitive regular expressions searched anywhere in the
    name. Commits without an author are kept.

    Raises:
        InvalidPatternError: If a pattern does not compile
    """
    return _not_authored_by(lambda commit: commit.author.name, patterns, source)


def not_authored_by_emails(patterns: Iterable[str], source: CommitSource) -> CommitSource:
    """Drop commits whose author email matches any of ``patterns``.

    Same matching rules as not_authored_by_names().

    Raises:
        InvalidPatternError: If a pattern does not compile
    """
    return _not_authored_by(lambda commit: commit.author.email, patterns, source)


def with_max_parents(n: int, source: CommitSource) -> CommitSource:
    """Keep commits with at most ``n`` parents (``n=1`` drops merges)."""
    return filtered(lambda commit: commit.num_parents <= n, source)

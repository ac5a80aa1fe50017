"""Exceptions raised while building or reading commit sources."""


class CommitError(Exception):
    """Base exception for building or reading commit sources."""

    pass


class DateFormatError(CommitError, ValueError):
    """Date cutoff is not a YYYY-MM-DD literal."""

    pass


class InvalidPatternError(CommitError, ValueError):
    """Author pattern is not a valid regular expression."""

    pass


class StreamReadError(CommitError, OSError):
    """Message stream could not be read or decoded."""

    pass


class ShortHashError(CommitError, ValueError):
    """Hash is too short to abbreviate."""

    pass


"""Repository access for commit sources.

Opens git repositories and reads their raw history through the git CLI.
"""

from .provider import Repository, RepositoryProvider, file_system
from .types import (
    GitError,
    LogTraversalError,
    NoHeadError,
    RawCommit,
    RepositoryOpenError,
    Signature,
)

__all__ = [
    "GitError",
    "LogTraversalError",
    "NoHeadError",
    "RawCommit",
    "Repository",
    "RepositoryOpenError",
    "RepositoryProvider",
    "Signature",
    "file_system",
]

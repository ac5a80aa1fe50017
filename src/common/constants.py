"""Shared constants for commit sources.

For environment-based configuration (repository path, git binary, default
filters), use the env module:
    from common.env import env
    repo_dir = env.repo_dir()
"""

# Number of leading hash characters in a short commit id
SHORT_HASH_LENGTH = 7

# Literal format accepted by the date cutoff filter
DATE_FORMAT = "%Y-%m-%d"

# Hash given to the single commit produced from an ad-hoc message
FAKE_SHA = "fakesha"

# Field separator for `git log --format` output. Records are NUL separated
# (`git log -z`) and the raw message is always the last field.
FIELD_SEP = "\x1f"

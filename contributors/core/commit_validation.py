"""Commit Validation: pure checks a source commit must pass before it is persisted.

Invariants:
    - validate_source_commit is PURE: returns messages, never raises
    - Empty list means valid; any message makes the importer reject the whole run
    - Only rejects what the commits table cannot hold: a blank author is stored as ""
      and the commit simply stays unattributed

Design Decisions:
    - Column limits mirrored from models/commit.py so PostgreSQL never sees a value
      it would refuse with a DataError
"""

import re

from contributors.core.domain_types import SourceCommit


OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{40}([0-9a-f]{24})?$")
MAX_SHORT_HASH_LENGTH = 16
MAX_NAME_LENGTH = 255

BOUNDED_FIELDS = (
    ("author_name", "Author name"),
    ("author_email", "Author email"),
    ("committer_name", "Committer name"),
    ("committer_email", "Committer email"),
)
TEXT_FIELDS = BOUNDED_FIELDS + (("message", "Message"),)


def validate_source_commit(commit: SourceCommit) -> list[str]:
    """Return human-readable validation messages (empty when valid)."""
    messages = []
    if not OBJECT_ID_PATTERN.match(commit.object_id or ""):
        messages.append(f"Object id is not a full hex hash: {commit.object_id!r}")
    if not commit.short_hash:
        messages.append("Short hash can't be blank")
    elif len(commit.short_hash) > MAX_SHORT_HASH_LENGTH:
        messages.append(
            f"Short hash is too long (maximum is {MAX_SHORT_HASH_LENGTH} characters)"
        )
    elif not (commit.object_id or "").startswith(commit.short_hash):
        messages.append("Short hash must be a prefix of the object id")

    for attr, label in BOUNDED_FIELDS:
        if len(getattr(commit, attr) or "") > MAX_NAME_LENGTH:
            messages.append(f"{label} is too long (maximum is {MAX_NAME_LENGTH} characters)")
    for attr, label in TEXT_FIELDS:
        if "\x00" in (getattr(commit, attr) or ""):
            messages.append(f"{label} contains a NUL byte")

    if commit.authored_at is None:
        messages.append("Authored date can't be blank")
    if commit.committed_at is None:
        messages.append("Committed date can't be blank")
    return messages

"""Commit Validation: tests for the pure pre-persistence checks."""

import pytest

from tests.services.fake_git import make_commit
from contributors.core.commit_validation import validate_source_commit


def test_valid_commit_has_no_messages():
    assert validate_source_commit(make_commit(1)) == []


def test_short_object_id_is_rejected():
    messages = validate_source_commit(make_commit(1, object_id="abc123", short_hash="abc"))
    assert any("full hex hash" in m for m in messages)


def test_blank_author_is_accepted():
    assert validate_source_commit(make_commit(1, author="")) == []
    assert validate_source_commit(make_commit(1, author="   ")) == []


def test_short_hash_must_prefix_object_id():
    messages = validate_source_commit(make_commit(1, short_hash="zzzzzzz"))
    assert "Short hash must be a prefix of the object id" in messages


def test_missing_dates_are_reported():
    messages = validate_source_commit(make_commit(1, authored_at=None, committed_at=None))
    assert "Authored date can't be blank" in messages
    assert "Committed date can't be blank" in messages


def test_sha256_object_ids_are_accepted():
    oid = "a" * 64
    assert validate_source_commit(make_commit(1, object_id=oid, short_hash=oid[:7])) == []


@pytest.mark.parametrize("field, label", [
    ("author_name", "Author name"),
    ("author_email", "Author email"),
    ("committer_name", "Committer name"),
    ("committer_email", "Committer email"),
])
def test_over_long_bounded_field_is_rejected(field, label):
    messages = validate_source_commit(make_commit(1, **{field: "x" * 256}))
    assert messages == [f"{label} is too long (maximum is 255 characters)"]


def test_field_at_the_limit_is_accepted():
    assert validate_source_commit(make_commit(1, committer_email="x" * 255)) == []


def test_over_long_short_hash_is_rejected():
    oid = make_commit(1).object_id
    messages = validate_source_commit(make_commit(1, short_hash=oid[:17]))
    assert messages == ["Short hash is too long (maximum is 16 characters)"]


@pytest.mark.parametrize("field, label", [
    ("author_name", "Author name"),
    ("committer_email", "Committer email"),
    ("message", "Message"),
])
def test_nul_byte_is_rejected(field, label):
    messages = validate_source_commit(make_commit(1, **{field: "bad\x00value"}))
    assert f"{label} contains a NUL byte" in messages

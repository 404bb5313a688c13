"""Names Manager: tests for canonicalization of commit credits.

Tests cover:
    - author name is the first candidate
    - equivalences map aliases onto one canonical name
    - blacklisted and non-name strings are dropped
    - Co-authored-by trailers and trailing [credit] lines add names
    - duplicates removed, order of first appearance kept
    - slugify produces URL-safe ids
"""

from tests.services.fake_git import make_commit
from contributors.core.names import NamesManager, slugify, split_names


# ─── extract_contributor_names ───────────────────────────────────

def test_author_is_the_only_name_of_a_plain_commit():
    names = NamesManager()
    assert names.extract_contributor_names(make_commit(1, "Alice Smith")) == ["Alice Smith"]


def test_equivalence_maps_alias_to_canonical_name():
    names = NamesManager(equivalences={"Bob": "Alice"})
    assert names.extract_contributor_names(make_commit(1, "Bob")) == ["Alice"]


def test_whitespace_is_collapsed_before_lookup():
    names = NamesManager(equivalences={"Bob Jones": "Robert Jones"})
    assert names.extract_contributor_names(make_commit(1, "  Bob   Jones ")) == ["Robert Jones"]


def test_blacklisted_author_yields_nothing():
    names = NamesManager(blacklist=["dependabot[bot]"])
    commit = make_commit(1, "dependabot[bot]", message="Bump rack")
    assert names.extract_contributor_names(commit) == []


def test_blacklist_is_case_insensitive():
    names = NamesManager(blacklist=["Root"])
    assert names.extract_contributor_names(make_commit(1, "root")) == []


def test_email_like_and_symbol_only_names_are_dropped():
    names = NamesManager()
    assert not names.looks_like_an_author_name("alice@example.com")
    assert not names.looks_like_an_author_name("1234")
    assert not names.looks_like_an_author_name("")
    assert names.looks_like_an_author_name("José Valim")


def test_co_authored_by_trailers_add_names():
    message = (
        "Fix the router\n\n"
        "Co-authored-by: Carol King <carol@example.com>\n"
        "co-authored-by: Dan Brown <dan@example.com>\n"
    )
    commit = make_commit(1, "Alice", message=message)
    assert NamesManager().extract_contributor_names(commit) == [
        "Alice", "Carol King", "Dan Brown",
    ]


def test_trailing_credit_line_adds_every_name():
    commit = make_commit(1, "Alice", message="Fix docs [Bob, Carol & Dan and Eve]")
    assert NamesManager().extract_contributor_names(commit) == [
        "Alice", "Bob", "Carol", "Dan", "Eve",
    ]


def test_credit_line_in_the_middle_is_ignored():
    commit = make_commit(1, "Alice", message="Use [brackets] in docs\n\nMore text")
    assert NamesManager().extract_contributor_names(commit) == ["Alice"]


def test_default_style_blacklist_drops_ci_skip_credit():
    names = NamesManager(blacklist=["ci skip"])
    commit = make_commit(1, "Alice", message="Typo [ci skip]")
    assert names.extract_contributor_names(commit) == ["Alice"]


def test_duplicates_removed_after_canonicalization():
    names = NamesManager(equivalences={"Al": "Alice"})
    commit = make_commit(1, "Alice", message="Pair work\n\nCo-authored-by: Al <al@x.org>")
    assert names.extract_contributor_names(commit) == ["Alice"]


def test_extraction_is_deterministic():
    names = NamesManager(equivalences={"Bob": "Alice"})
    commit = make_commit(1, "Bob and Carol")
    assert names.extract_contributor_names(commit) == names.extract_contributor_names(commit)


# ─── helpers ─────────────────────────────────────────────────────

def test_split_names_handles_all_separators():
    assert split_names("A, B & C and D") == ["A", "B", "C", "D"]


def test_split_names_keeps_and_inside_words():
    assert split_names("Alexander Anderson") == ["Alexander Anderson"]


def test_slugify_strips_accents_and_punctuation():
    assert slugify("José Valim") == "jose-valim"
    assert slugify("  O'Brien, Jr. ") == "o-brien-jr"

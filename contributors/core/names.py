"""Names Manager: pure canonicalization of the names credited by a commit.

Invariants:
    - extract_contributor_names is PURE and deterministic for a given manager
    - Every returned name is canonical (equivalence applied) and passes looks_like_an_author_name
    - Returned names are ordered by first appearance, never duplicated

Design Decisions:
    - Equivalences and blacklist are data (settings), not code: changing them between runs
      is exactly what the reconciler exists to absorb
    - Candidates come from the author, Co-authored-by trailers and a trailing
      "[Name, Other & Third]" credit line
"""

import re
import unicodedata
from typing import Iterable, Mapping

from contributors.core.repository_protocols import CommitLike


CO_AUTHORED_BY = re.compile(r"^\s*co-authored-by:\s*(?P<name>[^<\n]+?)\s*(?:<[^>]*>)?\s*$", re.I | re.M)
CREDIT_LINE = re.compile(r"\[(?P<names>[^\[\]\n]+)\]\s*\Z")
NAME_SEPARATORS = re.compile(r"\s*(?:,|&|\band\b)\s*")


def slugify(name: str) -> str:
    """Turn a canonical name into its URL slug ("José Valim" -> "jose-valim")."""
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")


def split_names(text: str) -> list[str]:
    """Split "A, B & C and D" into its individual names."""
    return [part for part in NAME_SEPARATORS.split(text.strip()) if part]


class NamesManager:
    """Maps raw author strings to canonical contributor names."""

    def __init__(
        self,
        equivalences: Mapping[str, str] | None = None,
        blacklist: Iterable[str] = (),
    ):
        self.equivalences = dict(equivalences or {})
        self.blacklist = {name.lower() for name in blacklist}

    def canonical_name_for(self, name: str) -> str:
        name = " ".join(name.split())
        return self.equivalences.get(name, name)

    def looks_like_an_author_name(self, name: str) -> bool:
        if not name or "@" in name:
            return False
        if not any(ch.isalpha() for ch in name):
            return False
        return name.lower() not in self.blacklist

    def candidate_names(self, commit: CommitLike) -> list[str]:
        """Raw, uncanonicalized candidates in the order they appear."""
        candidates = split_names(commit.author_name or "")
        message = (commit.message or "").rstrip()
        for match in CO_AUTHORED_BY.finditer(message):
            candidates.extend(split_names(match.group("name")))
        credit = CREDIT_LINE.search(message)
        if credit:
            candidates.extend(split_names(credit.group("names")))
        return candidates

    def extract_contributor_names(self, commit: CommitLike) -> list[str]:
        names: list[str] = []
        for candidate in self.candidate_names(commit):
            name = self.canonical_name_for(candidate)
            if self.looks_like_an_author_name(name) and name not in names:
                names.append(name)
        return names

"""Contribution Snapshot: the per-run working set shared by reconcile and assign.

Invariants:
    - A snapshot is built from commits and the current extractor only, never from
      the persisted contributors
    - names == union of every per-commit list
    - Snapshot is immutable once returned; it lives for exactly one run

Design Decisions:
    - Explicit value passed between steps instead of instance attributes on the orchestrator,
      so each step can be tested with a hand-built snapshot
"""

from dataclasses import dataclass, field

from contributors.core.domain_types import CommitKey


@dataclass
class ContributionSnapshot:
    """Canonical names per commit plus the set of all names, under current rules."""
    names_per_commit: dict[CommitKey, list[str]] = field(default_factory=dict)
    names: set[str] = field(default_factory=set)

    def names_for(self, commit_key: CommitKey) -> list[str]:
        return self.names_per_commit.get(commit_key, [])

    def record(self, commit_key: CommitKey, names: list[str]) -> None:
        if not names:
            return
        self.names_per_commit.setdefault(commit_key, []).extend(names)
        self.names.update(names)


def gone_names(previous: set[str], snapshot: ContributionSnapshot) -> set[str]:
    """Names persisted as contributors that no commit produces any more."""
    return previous - snapshot.names

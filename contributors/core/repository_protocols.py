"""Boundary Protocols: contracts between the sync core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - The git source and the name extractor are reached only through these Protocols
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - GitSource is synchronous: GitPython blocks, the orchestrator moves calls to a thread
"""

from datetime import datetime
from typing import Protocol

from contributors.core.domain_types import SourceCommit


class CommitLike(Protocol):
    """Structural contract for what the name extractor may read from a commit.

    Satisfied by both the Commit ORM model and SourceCommit.
    """
    object_id: str
    author_name: str
    author_email: str
    authored_at: datetime
    message: str


class GitSource(Protocol):
    """Contract for the git collaborator: implemented by infrastructure/git_repository.py."""
    @property
    def working_dir(self) -> str: ...

    def pull(self) -> None: ...

    def list_commits(
        self, ref: str, limit: int, offset: int,
    ) -> list[SourceCommit]: ...


class NameExtractor(Protocol):
    """Contract for the naming collaborator: pure, deterministic under current rules."""
    def extract_contributor_names(self, commit: CommitLike) -> list[str]: ...

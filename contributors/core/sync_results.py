"""Sync Results: explicit outcome values passed from each step to the orchestrator.

Invariants:
    - ImportOutcome is either ImportCompleted or ImportRejected, never both
    - ImportRejected is the ONLY signal that aborts the transaction for validation reasons
    - SyncReport is produced only for committed runs

Design Decisions:
    - Discriminated result over raising inside the transaction: rollback is an explicit
      decision taken in one place (services/repo_sync.py)
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime

from contributors.core.domain_types import ObjectId, SyncState


@dataclass(frozen=True)
class ImportCompleted:
    """New commits persisted in this run, newest first."""
    imported: list[ObjectId] = field(default_factory=list)
    pages_fetched: int = 0


@dataclass(frozen=True)
class ImportRejected:
    """A new commit failed validation or persistence."""
    object_id: ObjectId
    messages: list[str]


ImportOutcome = ImportCompleted | ImportRejected


@dataclass(frozen=True)
class ReconcileResult:
    gone_names: list[str] = field(default_factory=list)
    cleared_commits: int = 0
    drifted_commits: int = 0


@dataclass(frozen=True)
class AssignmentResult:
    assigned_commits: int = 0
    created_contributors: int = 0
    links_created: int = 0


@dataclass
class SyncReport:
    """Summary of one committed run."""
    repository: str
    state: SyncState
    started_at: datetime
    finished_at: datetime | None = None
    imported: list[ObjectId] = field(default_factory=list)
    gone_contributors: list[str] = field(default_factory=list)
    cleared_commits: int = 0
    assigned_commits: int = 0
    created_contributors: int = 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["state"] = self.state.value
        data["started_at"] = self.started_at.isoformat()
        data["finished_at"] = self.finished_at.isoformat() if self.finished_at else None
        return data

"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ObjectId wraps the full hex content hash of a commit; never the short hash
    - CommitKey is the surrogate integer key of a persisted commit
    - All run states and lock policies encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (SyncReport goes over the API)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ObjectId = NewType("ObjectId", str)
CommitKey = NewType("CommitKey", int)
ContributorName = NewType("ContributorName", str)


# ─── Enums ───────────────────────────────────────────────────────

class SyncState(str, Enum):
    """Sync run lifecycle. Committed and RolledBack both return to Idle."""
    IDLE = "idle"
    LOCKED = "locked"
    PULLING = "pulling"
    IMPORTING = "importing"
    RECONCILING = "reconciling"
    ASSIGNING = "assigning"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class LockPolicy(str, Enum):
    """What a second run does when the sync lock is already held."""
    WAIT = "wait"
    FAIL_FAST = "fail_fast"


# ─── Source Records ──────────────────────────────────────────────

@dataclass(frozen=True)
class SourceCommit:
    """A commit as read from the git collaborator, before persistence."""
    object_id: ObjectId
    short_hash: str
    author_name: str
    author_email: str
    authored_at: datetime
    committer_name: str
    committer_email: str
    committed_at: datetime
    message: str

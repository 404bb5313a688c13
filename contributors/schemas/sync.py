"""Sync Schemas: response model for a committed sync run."""

from datetime import datetime

from pydantic import BaseModel

from contributors.core.domain_types import SyncState


class SyncReportResponse(BaseModel):
    repository: str
    state: SyncState
    started_at: datetime
    finished_at: datetime | None = None
    imported: list[str] = []
    gone_contributors: list[str] = []
    cleared_commits: int = 0
    assigned_commits: int = 0
    created_contributors: int = 0

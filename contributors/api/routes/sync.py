"""Sync Route: POST hook that runs one sync of the configured repository.

Invariants:
    - Runs inside the request; returns the SyncReport of a committed run
    - Lock contention, transport and validation failures surface through the
      ContributorsError handler (409 / 502 / 422)
"""

from fastapi import APIRouter

from contributors.schemas.sync import SyncReportResponse
from contributors.services import repo_sync

router = APIRouter(prefix="/api/v1", tags=["sync"])


@router.post("/sync", response_model=SyncReportResponse)
async def trigger_sync():
    report = await repo_sync.update()
    return SyncReportResponse(**report.to_dict())

"""Sync Job: exit codes of the command-line entry point."""

from datetime import datetime, timezone

import pytest

from contributors import sync_job
from contributors.core.domain_types import SyncState
from contributors.core.errors import SyncInProgressError
from contributors.core.sync_results import SyncReport


class _Manager:
    def __init__(self):
        self.disposed = False

    async def dispose(self):
        self.disposed = True


@pytest.fixture
def manager(monkeypatch):
    fake = _Manager()
    monkeypatch.setattr(sync_job, "init_db", lambda *args, **kwargs: fake)
    return fake


async def test_committed_run_exits_zero(manager, monkeypatch):
    seen = {}

    async def _update(path=None, settings=None):
        seen["path"] = path
        return SyncReport(
            repository=path, state=SyncState.COMMITTED,
            started_at=datetime.now(timezone.utc), imported=["a" * 40],
        )
    monkeypatch.setattr(sync_job.repo_sync, "update", _update)

    assert await sync_job.run_sync("/srv/repo") == 0
    assert seen["path"] == "/srv/repo"
    assert manager.disposed


async def test_failed_run_exits_one_and_disposes(manager, monkeypatch):
    async def _update(path=None, settings=None):
        raise SyncInProgressError("pulling")
    monkeypatch.setattr(sync_job.repo_sync, "update", _update)

    assert await sync_job.run_sync() == 1
    assert manager.disposed


def test_main_passes_repository_path(monkeypatch):
    seen = []

    async def _run_sync(path=None):
        seen.append(path)
        return 0
    monkeypatch.setattr(sync_job, "run_sync", _run_sync)
    monkeypatch.setattr(sync_job, "setup_logging", lambda *args: None)

    assert sync_job.main(["/srv/repo"]) == 0
    assert sync_job.main([]) == 0
    assert seen == ["/srv/repo", None]

"""Sync route: POST /api/v1/sync runs one sync and maps failures to status codes."""

from httpx import ASGITransport, AsyncClient

from contributors.core.errors import CommitValidationError, SyncInProgressError
from contributors.main import app
from contributors.services import repo_sync
from tests.services.fake_git import FakeGitSource, linear_history, object_id_for


async def test_sync_returns_report(client, run_sync):
    run_sync(FakeGitSource(linear_history(2)))

    res = await client.post("/api/v1/sync")

    assert res.status_code == 200
    body = res.json()
    assert body["state"] == "committed"
    assert body["repository"] == "/repos/fake"
    assert body["imported"] == [object_id_for(2), object_id_for(1)]
    assert body["created_contributors"] == 1


async def test_second_sync_imports_nothing(client, run_sync):
    run_sync(FakeGitSource(linear_history(2)))
    await client.post("/api/v1/sync")

    res = await client.post("/api/v1/sync")

    assert res.status_code == 200
    assert res.json()["imported"] == []


async def test_lock_held_is_409(client, monkeypatch):
    async def _update(path=None, settings=None):
        raise SyncInProgressError("pulling")
    monkeypatch.setattr(repo_sync, "update", _update)

    res = await client.post("/api/v1/sync")

    assert res.status_code == 409
    assert res.json()["error"]["context"]["lock_name"] == "pulling"


async def test_pull_failure_is_502(client, run_sync):
    git = FakeGitSource(linear_history(1))
    git.pull_error = "could not read from remote"
    run_sync(git)

    res = await client.post("/api/v1/sync")

    assert res.status_code == 502
    assert res.json()["error"]["code"] == "GIT_TRANSPORT_ERROR"
    assert (await client.get("/api/v1/commits/unattributed")).json() == []


async def test_unexpected_failure_is_500_without_details(monkeypatch):
    async def _update(path=None, settings=None):
        raise RuntimeError("secret connection string")
    monkeypatch.setattr(repo_sync, "update", _update)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.post("/api/v1/sync")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


async def test_validation_failure_is_422_with_object_id(client, monkeypatch):
    async def _update(path=None, settings=None):
        raise CommitValidationError("a" * 40, ["Authored date can't be blank"])
    monkeypatch.setattr(repo_sync, "update", _update)

    res = await client.post("/api/v1/sync")

    assert res.status_code == 422
    assert res.json()["error"]["context"]["object_id"] == "a" * 40

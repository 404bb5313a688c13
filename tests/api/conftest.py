"""API test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe and sync runs use the test engine
    - run_sync replaces repo_sync.update with a run over a FakeGitSource

Design Decisions:
    - ASGITransport does not run the lifespan: no init_db against the configured URL
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from contributors.core.names import NamesManager
from contributors.db.base import Base
from contributors.infrastructure.database import get_db, DatabaseSessionManager
import contributors.infrastructure.database as db_module
from contributors.main import app
from contributors.services import repo_sync
from contributors.services.repo_sync import RepoSync


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def run_sync(monkeypatch, tmp_path):
    """Point POST /sync at the given git source; returns a setter."""
    def _use(git, extractor=None):
        async def _update(path=None, settings=None):
            sync = RepoSync(
                git, extractor or NamesManager(), db_module.get_db_manager(),
                lock_dir=str(tmp_path / "locks"),
            )
            return await sync.update()
        monkeypatch.setattr(repo_sync, "update", _update)
    return _use

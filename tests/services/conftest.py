"""Service test fixtures: async in-memory DB, session manager, fake git source.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - test_db_manager wraps the test engine so RepoSync opens sessions on it
    - Lock files live under tmp_path: tests never share a sync lock

Design Decisions:
    - SQLite in-memory with StaticPool: every session sees the same database
    - test_db_manager built with __new__: skips pool arguments SQLite does not accept
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.orm import selectinload
from sqlalchemy.pool import StaticPool

from contributors.db.base import Base
from contributors.infrastructure.database import DatabaseSessionManager
from contributors.models import Commit, Contributor
from contributors.services.repo_sync import RepoSync
from tests.services.fake_git import FakeGitSource, DictExtractor


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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def fake_git():
    return FakeGitSource()


@pytest.fixture
def extractor():
    return DictExtractor()


@pytest.fixture
def make_sync(test_db_manager, tmp_path):
    """Build a RepoSync over the test DB with its lock under tmp_path."""
    def _make(git, extractor, **kwargs):
        kwargs.setdefault("lock_dir", str(tmp_path / "locks"))
        return RepoSync(git, extractor, test_db_manager, **kwargs)
    return _make


@pytest.fixture
def store_state(test_session_factory):
    """Read the committed stores in a fresh session.

    Returns {"commits": [object_id, ...] by id, "contributors": {name: {object_id, ...}}}.
    """
    async def _read():
        async with test_session_factory() as db:
            commits = (await db.scalars(select(Commit).order_by(Commit.id))).all()
            contributors = (await db.scalars(
                select(Contributor).options(selectinload(Contributor.commits))
            )).all()
            return {
                "commits": [c.object_id for c in commits],
                "contributors": {
                    c.name: {commit.object_id for commit in c.commits}
                    for c in contributors
                },
            }
    return _read



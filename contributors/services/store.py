"""Store Helpers: batched commit iteration and dialect-aware conflict-free inserts.

Invariants:
    - iter_commits walks by ascending id in fixed-size batches (keyset, no OFFSET)
    - insert_ignoring_conflicts never raises on a duplicate unique key; it inserts or does nothing

Design Decisions:
    - Keyset pagination: rows linked while iterating cannot shift later batches
    - ON CONFLICT DO NOTHING picked per dialect (postgresql / sqlite): an atomic
      "insert if absent" that stays correct if assignment is ever parallelized
"""

from typing import AsyncIterator, Iterable, Iterator, Sequence, TypeVar

from sqlalchemy import Table, select, exists
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.models.commit import Commit
from contributors.models.contribution import contributions

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 1000
IN_CLAUSE_CHUNK = 500


def chunked(items: Sequence[T], size: int = IN_CLAUSE_CHUNK) -> Iterator[Sequence[T]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def unattributed():
    """WHERE clause matching commits with no contributor links."""
    return ~exists().where(contributions.c.commit_id == Commit.id)


async def iter_commits(
    db: AsyncSession, *criteria, batch_size: int = DEFAULT_BATCH_SIZE,
) -> AsyncIterator[Commit]:
    last_id = 0
    while True:
        batch = (await db.scalars(
            select(Commit)
            .where(Commit.id > last_id, *criteria)
            .order_by(Commit.id)
            .limit(batch_size)
        )).all()
        if not batch:
            return
        for commit in batch:
            yield commit
        last_id = batch[-1].id


async def known_object_ids(
    db: AsyncSession, object_ids: Iterable[str],
) -> set[str]:
    object_ids = list(object_ids)
    known: set[str] = set()
    for chunk in chunked(object_ids):
        result = await db.scalars(
            select(Commit.object_id).where(Commit.object_id.in_(chunk))
        )
        known.update(result.all())
    return known


def insert_ignoring_conflicts(
    db: AsyncSession, table: Table, index_elements: list[str],
):
    """INSERT ... ON CONFLICT (index_elements) DO NOTHING for the session's dialect."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        stmt = postgresql.insert(table)
    elif dialect == "sqlite":
        stmt = sqlite.insert(table)
    else:
        raise NotImplementedError(f"No conflict-free insert for dialect {dialect}")
    return stmt.on_conflict_do_nothing(index_elements=index_elements)

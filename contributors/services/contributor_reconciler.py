"""Contributor Reconciler: removes contributors no commit produces any more.

Invariants:
    - gone = persisted contributor names - snapshot names
    - Every commit linked to a gone contributor ends up with NO links at all,
      including links to contributors that survive
    - A commit whose linked names differ from its snapshot names is cleared the same way
    - Only deletes; never creates contributors or links

Design Decisions:
    - Clear-and-rebuild over diffing links: a commit credited to two names that were
      later merged into one is rebuilt correctly by the assignment pass, with no special cases
    - Link rows deleted explicitly before contributors: does not depend on the
      database enforcing ON DELETE CASCADE (SQLite without PRAGMA foreign_keys)
"""

import logging
from collections import defaultdict

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.contributions import ContributionSnapshot, gone_names
from contributors.core.domain_types import CommitKey
from contributors.core.sync_results import ReconcileResult
from contributors.models.contribution import contributions
from contributors.models.contributor import Contributor
from contributors.services.store import chunked

logger = logging.getLogger(__name__)


async def update_contributors(
    db: AsyncSession, snapshot: ContributionSnapshot,
) -> ReconcileResult:
    previous = set((await db.scalars(select(Contributor.name))).all())
    gone = sorted(gone_names(previous, snapshot))

    reassign = set(await destroy_gone_contributors(db, gone)) if gone else set()
    drifted = await drifted_commit_ids(db, snapshot)
    reassign.update(drifted)

    for chunk in chunked(sorted(reassign)):
        await db.execute(
            delete(contributions).where(contributions.c.commit_id.in_(chunk))
        )
    if reassign:
        logger.info(
            f"destroyed {len(gone)} contributor(s), {len(reassign)} commit(s) to reassign",
            extra={"gone": len(gone)},
        )
    return ReconcileResult(
        gone_names=gone, cleared_commits=len(reassign), drifted_commits=len(drifted),
    )


async def destroy_gone_contributors(
    db: AsyncSession, names: list[str],
) -> list[int]:
    """Destroy the contributors in names and return their distinct commit ids."""
    gone_ids: list[int] = []
    for chunk in chunked(names):
        gone_ids.extend((await db.scalars(
            select(Contributor.id).where(Contributor.name.in_(chunk))
        )).all())

    commit_ids: set[int] = set()
    for chunk in chunked(gone_ids):
        commit_ids.update((await db.scalars(
            select(contributions.c.commit_id)
            .where(contributions.c.contributor_id.in_(chunk))
            .distinct()
        )).all())
        await db.execute(
            delete(contributions).where(contributions.c.contributor_id.in_(chunk))
        )
        await db.execute(
            delete(Contributor)
            .where(Contributor.id.in_(chunk))
            .execution_options(synchronize_session=False)
        )
    return sorted(commit_ids)


async def drifted_commit_ids(
    db: AsyncSession, snapshot: ContributionSnapshot,
) -> set[int]:
    """Linked commits whose contributor names no longer match the snapshot."""
    linked: dict[int, set[str]] = defaultdict(set)
    rows = await db.execute(
        select(contributions.c.commit_id, Contributor.name)
        .join(Contributor, Contributor.id == contributions.c.contributor_id)
    )
    for commit_id, name in rows.all():
        linked[commit_id].add(name)
    return {
        commit_id for commit_id, names in linked.items()
        if names != set(snapshot.names_for(CommitKey(commit_id)))
    }

"""Contributor Queries: read-only views over the commit and contributor stores.

Invariants:
    - Never writes; safe to call while a sync is running (readers see the last committed run)
    - contributor_by_slug raises ResourceNotFoundError when nothing matches
"""

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.errors import ResourceNotFoundError
from contributors.models.commit import Commit
from contributors.models.contribution import contributions
from contributors.models.contributor import Contributor
from contributors.services.store import unattributed


async def commits_with_no_contributors(db: AsyncSession) -> list[Commit]:
    result = await db.scalars(
        select(Commit).where(unattributed()).order_by(Commit.committed_at.desc())
    )
    return list(result.all())


async def contributor_by_slug(db: AsyncSession, slug: str) -> Contributor:
    """Contributor whose url_id is slug (oldest row if rows were ever inserted by hand)."""
    contributor = await db.scalar(
        select(Contributor)
        .where(Contributor.url_id == slug)
        .order_by(Contributor.id)
        .limit(1)
    )
    if contributor is None:
        raise ResourceNotFoundError("Contributor", slug)
    return contributor


async def ranked_contributors(db: AsyncSession) -> list[tuple[Contributor, int]]:
    """Contributors with their commit counts, most commits first, then by name."""
    commit_count = func.count(contributions.c.commit_id).label("commit_count")
    result = await db.execute(
        select(Contributor, commit_count)
        .join(contributions, contributions.c.contributor_id == Contributor.id)
        .group_by(Contributor.id)
        .order_by(commit_count.desc(), Contributor.name)
    )
    return [(row[0], row[1]) for row in result.all()]


async def commits_for_contributor(
    db: AsyncSession, contributor_id: int,
) -> list[Commit]:
    result = await db.scalars(
        select(Commit)
        .join(contributions, contributions.c.commit_id == Commit.id)
        .where(contributions.c.contributor_id == contributor_id)
        .order_by(Commit.committed_at.desc(), Commit.id)
    )
    return list(result.all())

"""Assignment Pass: links every unattributed commit to its current contributors.

Invariants:
    - Visits only commits with zero links (new ones and those cleared by the reconciler)
    - Names come from the snapshot computed before this run's deletions
    - The only place contributor rows are created
    - find_or_create_contributor is a single atomic insert-if-absent followed by a read
    - url_id is unique among contributors: a slug already taken gets the lowest free
      "-N" suffix (N >= 2) when the row is created

Design Decisions:
    - A commit whose extraction is empty stays unattributed and is revisited each run
"""

import logging

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.contributions import ContributionSnapshot
from contributors.core.domain_types import CommitKey
from contributors.core.names import slugify
from contributors.core.sync_results import AssignmentResult
from contributors.models.contribution import contributions
from contributors.models.contributor import Contributor
from contributors.services.store import (
    iter_commits, unattributed, insert_ignoring_conflicts,
)

logger = logging.getLogger(__name__)

FALLBACK_SLUG = "contributor"


async def available_url_id(db: AsyncSession, name: str) -> str:
    """slugify(name), or slugify(name)-N with the lowest N >= 2 not yet taken."""
    base = slugify(name) or FALLBACK_SLUG
    taken = set((await db.scalars(
        select(Contributor.url_id).where(
            or_(Contributor.url_id == base, Contributor.url_id.like(f"{base}-%"))
        )
    )).all())
    if base not in taken:
        return base
    suffix = 2
    while f"{base}-{suffix}" in taken:
        suffix += 1
    return f"{base}-{suffix}"


async def find_or_create_contributor(
    db: AsyncSession, name: str,
) -> tuple[int, bool]:
    """Return (contributor id, created?) for the canonical name."""
    contributor_id = await db.scalar(
        select(Contributor.id).where(Contributor.name == name)
    )
    if contributor_id is not None:
        return contributor_id, False

    result = await db.execute(
        insert_ignoring_conflicts(db, Contributor.__table__, ["name"])
        .values(name=name, url_id=await available_url_id(db, name))
    )
    contributor_id = await db.scalar(
        select(Contributor.id).where(Contributor.name == name)
    )
    return contributor_id, result.rowcount == 1


async def assign_contributors_to_commits_with_none(
    db: AsyncSession, snapshot: ContributionSnapshot,
) -> AssignmentResult:
    contributor_ids: dict[str, int] = {}
    assigned = created = links = 0

    async for commit in iter_commits(db, unattributed()):
        names = snapshot.names_for(CommitKey(commit.id))
        if not names:
            continue
        for name in names:
            if name not in contributor_ids:
                contributor_ids[name], was_created = await find_or_create_contributor(db, name)
                created += was_created
            result = await db.execute(
                insert_ignoring_conflicts(
                    db, contributions, ["contributor_id", "commit_id"],
                ).values(contributor_id=contributor_ids[name], commit_id=commit.id)
            )
            links += result.rowcount
        assigned += 1

    if assigned:
        logger.info(
            f"assigned contributors to {assigned} commit(s), {created} new contributor(s)",
            extra={"assigned": assigned},
        )
    return AssignmentResult(
        assigned_commits=assigned, created_contributors=created, links_created=links,
    )

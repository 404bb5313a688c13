"""Contributor Routes: read-only ranking, detail and commit listings.

Invariants:
    - GET only; nothing here mutates the stores
    - Unknown slug -> 404 via ResourceNotFoundError
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.ranking import competition_ranks
from contributors.infrastructure.database import get_db
from contributors.schemas.contributor import (
    CommitSummary, ContributorSummary, ContributorDetail,
)
from contributors.services.contributor_queries import (
    ranked_contributors, contributor_by_slug, commits_for_contributor,
    commits_with_no_contributors,
)

router = APIRouter(prefix="/api/v1", tags=["contributors"])


@router.get("/contributors", response_model=list[ContributorSummary])
async def list_contributors(db: AsyncSession = Depends(get_db)):
    ranked = await ranked_contributors(db)
    ranks = competition_ranks([count for _, count in ranked])
    return [
        ContributorSummary(
            name=contributor.name, url_id=contributor.url_id,
            commit_count=count, rank=rank,
        )
        for (contributor, count), rank in zip(ranked, ranks)
    ]


@router.get("/contributors/{slug}", response_model=ContributorDetail)
async def get_contributor(slug: str, db: AsyncSession = Depends(get_db)):
    contributor = await contributor_by_slug(db, slug)
    commits = await commits_for_contributor(db, contributor.id)
    return ContributorDetail(
        name=contributor.name,
        url_id=contributor.url_id,
        commit_count=len(commits),
        commits=[CommitSummary.model_validate(c) for c in commits],
    )


@router.get("/contributors/{slug}/commits", response_model=list[CommitSummary])
async def get_contributor_commits(slug: str, db: AsyncSession = Depends(get_db)):
    contributor = await contributor_by_slug(db, slug)
    return [
        CommitSummary.model_validate(c)
        for c in await commits_for_contributor(db, contributor.id)
    ]


@router.get("/commits/unattributed", response_model=list[CommitSummary])
async def list_unattributed_commits(db: AsyncSession = Depends(get_db)):
    return [
        CommitSummary.model_validate(c)
        for c in await commits_with_no_contributors(db)
    ]

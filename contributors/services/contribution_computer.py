"""Contribution Computer: recomputes who contributed to every stored commit.

Invariants:
    - Reads every commit, old and new; ignores the contributors table altogether
    - No writes: the snapshot it returns is the only output
"""

from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.contributions import ContributionSnapshot
from contributors.core.domain_types import CommitKey
from contributors.core.repository_protocols import NameExtractor
from contributors.services.store import iter_commits, DEFAULT_BATCH_SIZE


async def compute_current_contributions(
    db: AsyncSession,
    extractor: NameExtractor,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> ContributionSnapshot:
    """Map every commit to the canonical names the extractor gives it today."""
    snapshot = ContributionSnapshot()
    async for commit in iter_commits(db, batch_size=batch_size):
        snapshot.record(
            CommitKey(commit.id), extractor.extract_contributor_names(commit),
        )
    return snapshot

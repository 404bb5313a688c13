"""Commit Importer: inserts the commits of the tracked branch that the store lacks.

Invariants:
    - Walks from the branch head downwards, page_size commits per fetch, offset += page_size
    - The first already-known commit ends the whole import (not just the page)
    - An empty page ends the import (root of history reached)
    - Never commits and never raises for bad commits: returns ImportRejected instead
    - A row the database refuses (duplicate key, value it cannot store) is rejected
      the same way, carrying the object id and the driver message

Design Decisions:
    - Commits are flushed one by one: newer commits get lower ids within one import,
      and that order is only meaningful relative to this import
    - History is assumed append-only; a force-push that rewrites already-imported
      commits is not detected here
"""

import asyncio
import logging

from sqlalchemy.exc import IntegrityError, DataError
from sqlalchemy.ext.asyncio import AsyncSession

from contributors.core.commit_validation import validate_source_commit
from contributors.core.domain_types import ObjectId, SourceCommit
from contributors.core.repository_protocols import GitSource
from contributors.core.sync_results import (
    ImportCompleted, ImportRejected, ImportOutcome,
)
from contributors.models.commit import Commit
from contributors.services.store import known_object_ids

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class CommitImporter:
    """Imports new commits from a GitSource into the current transaction."""

    def __init__(
        self, db: AsyncSession, git: GitSource, page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.db = db
        self.git = git
        self.page_size = page_size

    async def import_new_commits(self, ref: str) -> ImportOutcome:
        imported: list[ObjectId] = []
        offset = 0
        pages = 0
        while True:
            page = await asyncio.to_thread(
                self.git.list_commits, ref, self.page_size, offset,
            )
            pages += 1
            if not page:
                return ImportCompleted(imported=imported, pages_fetched=pages)

            known = await known_object_ids(self.db, (c.object_id for c in page))
            for source in page:
                if source.object_id in known:
                    return ImportCompleted(imported=imported, pages_fetched=pages)
                rejected = await self.import_source_commit(source)
                if rejected:
                    return rejected
                imported.append(source.object_id)
            offset += self.page_size

    async def import_source_commit(self, source: SourceCommit) -> ImportRejected | None:
        """Persist one commit. Returns ImportRejected when it can't be saved."""
        messages = validate_source_commit(source)
        if not messages:
            commit = Commit.from_source(source)
            self.db.add(commit)
            try:
                await self.db.flush()
            except (IntegrityError, DataError) as e:
                messages = [str(e.orig)]
            else:
                logger.info(
                    f"imported commit {commit.short_hash}",
                    extra={"object_id": source.object_id},
                )
                return None

        logger.error(
            f"couldn't import commit {source.object_id}",
            extra={"object_id": source.object_id},
        )
        logger.error("; ".join(messages), extra={"object_id": source.object_id})
        return ImportRejected(object_id=source.object_id, messages=messages)

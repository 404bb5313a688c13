"""Repo Sync: the single entry point that brings the database up to date with a pull.

Invariants:
    - Lock -> pull -> one transaction (import, compute, reconcile, assign) -> unlock, strictly in order
    - The lock is released on every exit path; its critical section contains the whole transaction
    - A pull failure aborts before any session is opened
    - ImportRejected rolls the transaction back: no commit of the failed run stays persisted
    - State transitions: idle -> locked -> pulling -> importing -> reconciling -> assigning
      -> committed | rolled_back -> idle

Design Decisions:
    - Blocking git calls run in a worker thread (asyncio.to_thread); DB work stays async
    - Rollback on rejection is explicit (tx.rollback()) and decided here, not inside the importer
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from contributors.config import Settings, get_settings
from contributors.core.domain_types import SyncState, LockPolicy
from contributors.core.errors import CommitValidationError, ErrorContext
from contributors.core.names import NamesManager
from contributors.core.repository_protocols import GitSource, NameExtractor
from contributors.core.sync_results import ImportRejected, SyncReport
from contributors.infrastructure.database import DatabaseSessionManager, get_db_manager
from contributors.infrastructure.git_repository import GitRepository
from contributors.infrastructure.sync_lock import acquiring_sync_lock
from contributors.services.commit_importer import CommitImporter, DEFAULT_PAGE_SIZE
from contributors.services.contribution_computer import compute_current_contributions
from contributors.services.contributor_reconciler import update_contributors
from contributors.services.contributor_assignment import (
    assign_contributors_to_commits_with_none,
)

logger = logging.getLogger(__name__)


class RepoSync:
    """Synchronizes one repository working copy into the commit and contributor stores."""

    def __init__(
        self,
        git: GitSource,
        extractor: NameExtractor,
        db_manager: DatabaseSessionManager,
        *,
        branch: str = "master",
        page_size: int = DEFAULT_PAGE_SIZE,
        lock_name: str = "pulling",
        lock_dir: str = "tmp",
        lock_policy: LockPolicy = LockPolicy.WAIT,
    ):
        self.git = git
        self.extractor = extractor
        self.db_manager = db_manager
        self.branch = branch
        self.page_size = page_size
        self.lock_name = lock_name
        self.lock_dir = lock_dir
        self.lock_policy = lock_policy
        self.state = SyncState.IDLE

    @classmethod
    def from_settings(
        cls,
        git: GitSource,
        db_manager: DatabaseSessionManager,
        settings: Settings,
        extractor: NameExtractor | None = None,
    ) -> "RepoSync":
        return cls(
            git,
            extractor or NamesManager(settings.name_equivalences, settings.name_blacklist),
            db_manager,
            branch=settings.tracked_branch,
            page_size=settings.commit_page_size,
            lock_name=settings.sync_lock_name,
            lock_dir=settings.sync_lock_dir,
            lock_policy=settings.sync_lock_policy,
        )

    def _transition(self, state: SyncState) -> None:
        self.state = state
        logger.info(
            f"sync {state.value}",
            extra={"repository": self.git.working_dir, "sync_state": state.value},
        )

    async def update(self) -> SyncReport:
        report = SyncReport(
            repository=self.git.working_dir,
            state=SyncState.IDLE,
            started_at=datetime.now(timezone.utc),
        )
        try:
            async with acquiring_sync_lock(self.lock_name, self.lock_dir, self.lock_policy):
                self._transition(SyncState.LOCKED)
                self._transition(SyncState.PULLING)
                await asyncio.to_thread(self.git.pull)
                async with self.db_manager.session() as db:
                    await self._update_database(db, report)
        finally:
            self._transition(SyncState.IDLE)

        report.state = SyncState.COMMITTED
        report.finished_at = datetime.now(timezone.utc)
        return report

    async def _update_database(self, db: AsyncSession, report: SyncReport) -> None:
        try:
            async with db.begin() as tx:
                self._transition(SyncState.IMPORTING)
                outcome = await CommitImporter(
                    db, self.git, self.page_size,
                ).import_new_commits(self.branch)
                if isinstance(outcome, ImportRejected):
                    await tx.rollback()
                else:
                    report.imported = list(outcome.imported)
                    await self._reconcile_and_assign(db, report)
        except Exception:
            self._transition(SyncState.ROLLED_BACK)
            raise

        if isinstance(outcome, ImportRejected):
            self._transition(SyncState.ROLLED_BACK)
            logger.error(
                f"rolled back sync of {self.git.working_dir}: "
                f"commit {outcome.object_id} rejected",
                extra={
                    "repository": self.git.working_dir,
                    "object_id": outcome.object_id,
                    "error_code": "COMMIT_VALIDATION_ERROR",
                },
            )
            raise CommitValidationError(
                outcome.object_id, outcome.messages,
                ErrorContext(repository=self.git.working_dir),
            )
        self._transition(SyncState.COMMITTED)

    async def _reconcile_and_assign(self, db: AsyncSession, report: SyncReport) -> None:
        self._transition(SyncState.RECONCILING)
        snapshot = await compute_current_contributions(db, self.extractor)
        reconciled = await update_contributors(db, snapshot)
        report.gone_contributors = reconciled.gone_names
        report.cleared_commits = reconciled.cleared_commits

        self._transition(SyncState.ASSIGNING)
        assigned = await assign_contributors_to_commits_with_none(db, snapshot)
        report.assigned_commits = assigned.assigned_commits
        report.created_contributors = assigned.created_contributors


async def update(path: str | None = None, settings: Settings | None = None) -> SyncReport:
    """Pull the repository at path and bring the database up to date."""
    settings = settings or get_settings()
    git = GitRepository(path or settings.repository_path)
    return await RepoSync.from_settings(git, get_db_manager(), settings).update()

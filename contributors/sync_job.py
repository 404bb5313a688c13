"""Sync Job: run one sync outside the API, for cron or a webhook worker.

    python -m contributors.sync_job [REPOSITORY_PATH]
"""

import asyncio
import logging
import sys

from contributors.config import get_settings
from contributors.core.errors import ContributorsError
from contributors.infrastructure.database import init_db
from contributors.infrastructure.observability import setup_logging
from contributors.services import repo_sync

logger = logging.getLogger(__name__)


async def run_sync(path: str | None = None) -> int:
    settings = get_settings()
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        report = await repo_sync.update(path, settings)
    except ContributorsError as e:
        logger.error(f"sync failed: {e.message}", extra={"error_code": e.code})
        return 1
    finally:
        await manager.dispose()
    logger.info(
        f"sync of {report.repository} committed: {len(report.imported)} new commit(s)",
        extra={"repository": report.repository, "imported": len(report.imported)},
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return asyncio.run(run_sync(argv[0] if argv else None))


if __name__ == "__main__":
    sys.exit(main())

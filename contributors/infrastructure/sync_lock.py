"""Sync Lock: named, cross-process exclusive lock around one sync run.

Invariants:
    - At most one holder per lock name across processes on the host
    - Released on every exit path, including exceptions
    - WAIT blocks (in a worker thread) until released; FAIL_FAST raises SyncInProgressError

Design Decisions:
    - fcntl.flock on <lock_dir>/<name>.lock: every acquisition opens its own file
      description, so coroutines in one process exclude each other too
"""

import asyncio
import fcntl
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from contributors.core.domain_types import LockPolicy
from contributors.core.errors import SyncInProgressError

logger = logging.getLogger(__name__)


def lock_path_for(name: str, lock_dir: str | Path) -> Path:
    return Path(lock_dir) / f"{name}.lock"


@asynccontextmanager
async def acquiring_sync_lock(
    name: str, lock_dir: str | Path, policy: LockPolicy = LockPolicy.WAIT,
) -> AsyncIterator[Path]:
    """Hold the named lock for the duration of the block."""
    path = lock_path_for(name, lock_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as lock_f:
        fd = lock_f.fileno()
        if policy == LockPolicy.FAIL_FAST:
            try:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                logger.warning(
                    f"Sync lock {name} is held, giving up",
                    extra={"lock_name": name},
                )
                raise SyncInProgressError(name)
        else:
            await asyncio.to_thread(fcntl.flock, fd, fcntl.LOCK_EX)
        logger.debug(f"Acquired sync lock: {path}", extra={"lock_name": name})
        try:
            yield path
        finally:
            fcntl.flock(fd, fcntl.LOCK_UN)
            logger.debug(f"Released sync lock: {path}", extra={"lock_name": name})

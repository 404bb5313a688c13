"""Git Repository: GitPython adapter implementing the GitSource protocol.

Invariants:
    - list_commits returns newest-first commits; an empty list means end of history
    - Every GitPython failure surfaces as GitTransportError (never a raw GitCommandError)
    - Methods block; callers in async code wrap them with asyncio.to_thread

Design Decisions:
    - iter_commits(max_count, skip) maps one-to-one onto the paginated contract
    - Short hash is the first 7 hex digits: avoids a rev-parse per commit
"""

import logging

from git import Repo, Commit as GitCommit
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from contributors.core.domain_types import ObjectId, SourceCommit
from contributors.core.errors import GitTransportError, ErrorContext

logger = logging.getLogger(__name__)

SHORT_HASH_LENGTH = 7


def source_commit_from(commit: GitCommit) -> SourceCommit:
    """Convert a GitPython commit into the core SourceCommit record."""
    return SourceCommit(
        object_id=ObjectId(commit.hexsha),
        short_hash=commit.hexsha[:SHORT_HASH_LENGTH],
        author_name=commit.author.name or "",
        author_email=commit.author.email or "",
        authored_at=commit.authored_datetime,
        committer_name=commit.committer.name or "",
        committer_email=commit.committer.email or "",
        committed_at=commit.committed_datetime,
        message=commit.message if isinstance(commit.message, str)
        else commit.message.decode("utf-8", "replace"),
    )


class GitRepository:
    """Working copy of the tracked repository."""

    def __init__(self, path: str):
        try:
            self._repo = Repo(path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise GitTransportError(
                f"{path} is not a git repository", "open",
                ErrorContext(repository=path, debug_info={"error": str(e)}),
            )

    @property
    def working_dir(self) -> str:
        return str(self._repo.working_dir)

    def pull(self) -> None:
        logger.info(f"pulling {self.working_dir}", extra={"repository": self.working_dir})
        try:
            self._repo.git.pull("-q")
        except GitCommandError as e:
            raise GitTransportError(
                (e.stderr or str(e)).strip(), "pull",
                ErrorContext(repository=self.working_dir, debug_info={"status": e.status}),
            )

    def list_commits(
        self, ref: str, limit: int, offset: int,
    ) -> list[SourceCommit]:
        try:
            commits = self._repo.iter_commits(ref, max_count=limit, skip=offset)
            return [source_commit_from(c) for c in commits]
        except GitCommandError as e:
            raise GitTransportError(
                (e.stderr or str(e)).strip(), "log",
                ErrorContext(repository=self.working_dir, debug_info={"ref": ref}),
            )

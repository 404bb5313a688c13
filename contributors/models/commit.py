"""Commit ORM: one row per unique repository object id.

Invariants:
    - object_id is unique and immutable; rows are never updated or deleted by the sync
    - id is an insertion sequence: within one import, newer commits get lower ids;
      across imports it is NOT a timeline
    - A commit with no rows in contributions is "unattributed"

Design Decisions:
    - Integer surrogate key over object_id as PK: keeps the link table narrow
    - Relationship is viewonly and lazy="raise": links are written with Core statements,
      readers opt in with selectinload()
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contributors.db.base import Base
from contributors.core.domain_types import SourceCommit
from contributors.models.contribution import contributions


class Commit(Base):
    """A commit imported from the tracked branch."""
    __tablename__ = "commits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    object_id: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    short_hash: Mapped[str] = mapped_column(String(16), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    authored_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    committer_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    committer_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    committed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    imported_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    contributors: Mapped[list["Contributor"]] = relationship(
        "Contributor", secondary=contributions,
        viewonly=True, lazy="raise",
    )

    @classmethod
    def from_source(cls, source: SourceCommit) -> "Commit":
        return cls(
            object_id=source.object_id,
            short_hash=source.short_hash,
            author_name=source.author_name or "",
            author_email=source.author_email or "",
            authored_at=source.authored_at,
            committer_name=source.committer_name or "",
            committer_email=source.committer_email or "",
            committed_at=source.committed_at,
            message=source.message or "",
        )

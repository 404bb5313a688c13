"""Contributor ORM: one row per canonical contributor name.

Invariants:
    - name is unique; it is the identity of the row
    - url_id is slugify(name), suffixed "-N" when another contributor already holds it;
      indexed for lookups
    - Created only by the assignment pass, destroyed only by the reconciler

Design Decisions:
    - No history survives destruction: a name that reappears gets a new row
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contributors.db.base import Base
from contributors.models.contribution import contributions


class Contributor(Base):
    """A canonical contributor name and the commits it is credited for."""
    __tablename__ = "contributors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    url_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    commits: Mapped[list["Commit"]] = relationship(
        "Commit", secondary=contributions,
        viewonly=True, lazy="raise",
    )

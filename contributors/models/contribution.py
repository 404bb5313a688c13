"""Contribution link table: many-to-many between contributors and commits.

Invariants:
    - (contributor_id, commit_id) is the primary key: a link exists at most once
    - No payload and no identity of its own
    - Both foreign keys cascade on delete at the database level

Design Decisions:
    - Plain Table instead of a mapped class: the sync steps write it with Core
      insert/delete statements, never through relationship collections
"""

from sqlalchemy import Table, Column, Integer, ForeignKey

from contributors.db.base import Base


contributions = Table(
    "contributions",
    Base.metadata,
    Column(
        "contributor_id", Integer,
        ForeignKey("contributors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "commit_id", Integer,
        ForeignKey("commits.id", ondelete="CASCADE"),
        primary_key=True, index=True,
    ),
)

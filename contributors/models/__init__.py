"""ORM Models: SQLAlchemy declarative models for commits, contributors and their links.

Invariants:
    - All models inherit from Base (db/base.py)
    - The contributions link table is written only by the reconciler (delete) and the
      assignment pass (insert)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from contributors.models.contribution import contributions  # noqa: F401
from contributors.models.commit import Commit  # noqa: F401
from contributors.models.contributor import Contributor  # noqa: F401

"""Initial schema: commits, contributors, contributions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "commits",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("object_id", sa.String(64), nullable=False, unique=True),
        sa.Column("short_hash", sa.String(16), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("author_email", sa.String(255), nullable=False, server_default=""),
        sa.Column("authored_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("committer_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("committer_email", sa.String(255), nullable=False, server_default=""),
        sa.Column("committed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("message", sa.Text, nullable=False, server_default=""),
        sa.Column("imported_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "contributors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("url_id", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_contributors_url_id", "contributors", ["url_id"])

    op.create_table(
        "contributions",
        sa.Column(
            "contributor_id", sa.Integer,
            sa.ForeignKey("contributors.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "commit_id", sa.Integer,
            sa.ForeignKey("commits.id", ondelete="CASCADE"), primary_key=True,
        ),
    )
    op.create_index("ix_contributions_commit_id", "contributions", ["commit_id"])


def downgrade() -> None:
    op.drop_index("ix_contributions_commit_id", table_name="contributions")
    op.drop_table("contributions")
    op.drop_index("ix_contributors_url_id", table_name="contributors")
    op.drop_table("contributors")
    op.drop_table("commits")

"""Contributor Schemas: Pydantic models for contributor and commit API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CommitSummary(BaseModel):
    """A commit as listed under a contributor or as unattributed."""
    model_config = ConfigDict(from_attributes=True)

    object_id: str
    short_hash: str
    author_name: str
    committed_at: datetime
    message: str


class ContributorSummary(BaseModel):
    """A contributor row in the ranking."""
    name: str
    url_id: str
    commit_count: int
    rank: int


class ContributorDetail(BaseModel):
    name: str
    url_id: str
    commit_count: int
    commits: list[CommitSummary] = []

"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - name_equivalences / name_blacklist parsed from JSON env values: canonicalization
      rules change without a deploy, and the next sync reconciles them
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from contributors.core.domain_types import LockPolicy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://contributors:contributors@db:5432/contributors"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Repository
    repository_path: str = "repo"
    tracked_branch: str = "master"
    commit_page_size: int = 100

    # Sync lock
    sync_lock_name: str = "pulling"
    sync_lock_dir: str = "tmp"
    sync_lock_policy: LockPolicy = LockPolicy.WAIT

    # Naming rules
    name_equivalences: dict[str, str] = {}
    name_blacklist: list[str] = ["ci skip", "skip ci"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

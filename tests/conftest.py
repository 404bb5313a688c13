"""Root conftest: shared test configuration."""

import os

# Ensure tests never touch a real database or repository
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("REPOSITORY_PATH", "/nonexistent/repository")

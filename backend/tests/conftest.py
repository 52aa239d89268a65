"""Root conftest: shared test configuration."""

import os

# Tests never reach a real PostgreSQL; every executor is bound to SQLite.
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

"""API test fixtures: in-memory SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database built from the schema models
    - get_executor dependency overridden with an executor bound to that database
    - failing_client serves every request from an executor whose statements
      all fail, for store rejections SQLite cannot reproduce

Design Decisions:
    - StaticPool: one shared connection, so every statement sees the same
      in-memory database
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from restaurantes_api.core.errors import StoreError
from restaurantes_api.db.base import Base
from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.main import app
import restaurantes_api.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_executor(test_engine):
    return QueryExecutor(test_engine)


@pytest.fixture
async def client(test_executor):
    """FastAPI test client with the executor dependency overridden."""
    async def override_get_executor():
        yield test_executor

    app.dependency_overrides[get_executor] = override_get_executor

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


class FailingExecutor:
    """Executor stand-in whose every statement is rejected by the store."""

    def __init__(self, message: str):
        self.message = message
        self.calls: list[tuple[str, list]] = []

    async def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        raise StoreError(self.message, "query")

    async def health_check(self) -> bool:
        return False


@pytest.fixture
def failing_executor():
    return FailingExecutor(
        'invalid input syntax for type integer: "abc"',
    )


@pytest.fixture
async def failing_client(failing_executor):
    async def override_get_executor():
        yield failing_executor

    app.dependency_overrides[get_executor] = override_get_executor

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()

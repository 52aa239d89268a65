"""Query Executor: pool-backed execution of positional SQL templates.

Invariants:
    - One executor (one AsyncEngine, one pool) per process, created on startup
    - Every execute() call is one statement in its own implicit transaction:
      committed on success, rolled back on failure
    - All SQLAlchemy/driver exceptions surface as StoreError (core/errors.py)
    - No retries, no local validation of parameter count or types

Design Decisions:
    - Templates use $1..$n placeholders; they are rebound as :p1..:pn so the
      same template runs through sqlalchemy.text() on any dialect
    - Path segments reach the driver as str; psycopg sends them untyped and the
      store casts (or rejects) them
"""

import logging
import re
from typing import Any, AsyncGenerator, Sequence

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from restaurantes_api.core.errors import ErrorContext, StoreError

logger = logging.getLogger(__name__)

_POSITIONAL = re.compile(r"\$(\d+)")

Row = dict[str, Any]


def bind_positional(
    sql: str, params: Sequence[Any],
) -> tuple[str, dict[str, Any]]:
    """Rewrite $n placeholders as named binds and key params by position."""
    named = _POSITIONAL.sub(lambda m: f":p{m.group(1)}", sql)
    binds = {f"p{i}": value for i, value in enumerate(params, start=1)}
    return named, binds


def _driver_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc).strip()


class QueryExecutor:
    """Executes single SQL statements against the shared connection pool."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(
        self, sql: str, params: Sequence[Any] = (),
    ) -> list[Row]:
        """Run one statement and return its rows (empty if it returns none)."""
        statement, binds = bind_positional(sql, params)
        logger.debug("Executing statement", extra={"sql": sql})
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), binds)
                rows = (
                    [dict(row) for row in result.mappings().all()]
                    if result.returns_rows else []
                )
        except IntegrityError as e:
            logger.error(f"DB integrity error: {e}", extra={"sql": sql})
            raise StoreError(_driver_message(e), "commit", ErrorContext(sql=sql))
        except OperationalError as e:
            logger.error(f"DB operational error: {e}", extra={"sql": sql})
            raise StoreError(_driver_message(e), "connect", ErrorContext(sql=sql))
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"sql": sql})
            raise StoreError(_driver_message(e), "query", ErrorContext(sql=sql))
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"sql": sql})
            raise StoreError(_driver_message(e), "execute", ErrorContext(sql=sql))
        logger.debug(
            "Statement completed", extra={"sql": sql, "row_count": len(rows)},
        )
        return rows

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.execute("SELECT 1")
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
executor: QueryExecutor | None = None


def init_db(database_url: str, pool_size: int = 10, max_overflow: int = 5):
    global executor
    engine = create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    executor = QueryExecutor(engine)


async def close_db() -> None:
    global executor
    if executor is not None:
        await executor.dispose()
        executor = None


async def get_executor() -> AsyncGenerator[QueryExecutor, None]:
    """FastAPI dependency for the shared query executor."""
    if not executor:
        raise RuntimeError("Database not initialized")
    yield executor

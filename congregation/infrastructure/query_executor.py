"""Query Executor — generic single-row, multi-row and mutation primitives.

Invariants:
    - No entity knowledge: callers supply the statement, parameters and row consumer
    - fetch_one returns None on "no rows" and never calls the consumer in that case
    - fetch_many closes the streamed result on every exit path, consumer failure included
    - Without a bound connection every call runs in its own engine.begin() transaction
    - Storage exceptions and deadline expiry leave as PersistenceError; consumer errors pass through
    - Holds no per-call mutable state: one instance is shared across concurrent requests

Design Decisions:
    - Statements are SQLAlchemy executables (text() or Core constructs) so column
      types drive bind processing on both asyncpg and aiosqlite
    - asyncio.timeout per call: expiry cancels the driver await, which aborts the query
"""

import asyncio
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Awaitable, Callable, Iterator, Mapping, TypeVar

from sqlalchemy.engine import Row
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncResult
from sqlalchemy.sql import Executable

from congregation.core.errors import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Params = Mapping[str, object] | None


@contextmanager
def translate_storage_errors(operation: str) -> Iterator[None]:
    """Map SQLAlchemy failures and timeouts to PersistenceError."""
    try:
        yield
    except IntegrityError as e:
        logger.error(f"DB integrity error: {e}", extra={"operation": operation})
        raise PersistenceError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        logger.error(f"DB operational error: {e}", extra={"operation": operation})
        raise PersistenceError("Connection or operational error", operation) from e
    except DBAPIError as e:
        logger.error(f"DB driver error: {e}", extra={"operation": operation})
        raise PersistenceError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
        raise PersistenceError("Database operation failed", operation) from e
    except TimeoutError as e:
        logger.error("DB statement timed out", extra={"operation": operation})
        raise PersistenceError("Statement timed out", operation) from e


class QueryExecutor:
    """Runs parameterized statements against the pool or a bound connection."""

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        timeout_seconds: float | None = None,
        connection: AsyncConnection | None = None,
    ):
        self._engine = engine
        self._timeout_seconds = timeout_seconds
        self._connection = connection

    @property
    def is_bound(self) -> bool:
        return self._connection is not None

    def bind(self, connection: AsyncConnection) -> "QueryExecutor":
        """Executor that issues statements on `connection` without committing."""
        return QueryExecutor(
            self._engine,
            timeout_seconds=self._timeout_seconds,
            connection=connection,
        )

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[AsyncConnection]:
        if self._connection is not None:
            yield self._connection
            return
        async with self._engine.begin() as conn:
            yield conn

    async def fetch_one(
        self,
        statement: Executable,
        consume_row: Callable[[Row], T],
        params: Params = None,
    ) -> T | None:
        """Execute and hand the first row to consume_row; None when no row matched."""
        with translate_storage_errors("fetch_one"):
            async with asyncio.timeout(self._timeout_seconds), self._connect() as conn:
                result = await conn.execute(statement, params)
                row = result.first()
        if row is None:
            return None
        return consume_row(row)

    async def fetch_many(
        self,
        statement: Executable,
        consume_rows: Callable[[AsyncResult], Awaitable[T]],
        params: Params = None,
    ) -> T:
        """Stream the result to consume_rows, which iterates it to completion."""
        with translate_storage_errors("fetch_many"):
            async with asyncio.timeout(self._timeout_seconds), self._connect() as conn:
                result = await conn.stream(statement, params)
                try:
                    return await consume_rows(result)
                finally:
                    await result.close()

    async def execute(self, statement: Executable, params: Params = None) -> None:
        """Run INSERT/UPDATE/DELETE. Row counts are not interpreted."""
        with translate_storage_errors("execute"):
            async with asyncio.timeout(self._timeout_seconds), self._connect() as conn:
                await conn.execute(statement, params)

"""Unit of Work — one atomic transaction scope over a pooled connection.

Invariants:
    - State machine: idle -> active -> committed | rolled_back (TransactionState)
    - begin() while active raises PersistenceError; begin() from a terminal state opens a fresh scope
    - commit()/rollback() without an active transaction are no-ops
    - The connection is returned to the pool on every commit/rollback path, failures included
    - A failed or cancelled commit ends in rolled_back; failures raise PersistenceError
    - `async with` commits on clean exit and rolls back when the block raises

Design Decisions:
    - Repositories join the transaction through executor(), a QueryExecutor bound to
      the active connection; no repository needs to know a transaction exists
    - Current request paths auto-commit per statement and do not use this class
"""

import logging
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncTransaction

from congregation.core.domain_types import TransactionState
from congregation.core.errors import PersistenceError
from congregation.infrastructure.query_executor import (
    QueryExecutor, translate_storage_errors,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Transaction coordinator exposing the active connection to callers."""

    def __init__(self, engine: AsyncEngine, *, timeout_seconds: float | None = None):
        self._engine = engine
        self._timeout_seconds = timeout_seconds
        self._connection: AsyncConnection | None = None
        self._transaction: AsyncTransaction | None = None
        self.state = TransactionState.IDLE

    @property
    def connection(self) -> AsyncConnection | None:
        """Active transaction handle, or None outside begin()/commit()."""
        return self._connection

    @property
    def is_active(self) -> bool:
        return self.state is TransactionState.ACTIVE

    def executor(self) -> QueryExecutor:
        """QueryExecutor whose statements run inside this transaction."""
        if self._connection is None:
            raise RuntimeError("Unit of work has no active transaction")
        return QueryExecutor(
            self._engine,
            timeout_seconds=self._timeout_seconds,
            connection=self._connection,
        )

    async def begin(self) -> None:
        if self.is_active:
            raise PersistenceError("transaction already active", "begin")
        with translate_storage_errors("begin"):
            connection = await self._engine.connect()
            try:
                self._transaction = await connection.begin()
            except BaseException:
                await connection.close()
                raise
        self._connection = connection
        self.state = TransactionState.ACTIVE

    async def commit(self) -> None:
        if self._transaction is None:
            return
        committed = False
        try:
            with translate_storage_errors("commit"):
                await self._transaction.commit()
            committed = True
        finally:
            # failure or cancellation both end the scope as rolled back
            self.state = (
                TransactionState.COMMITTED if committed
                else TransactionState.ROLLED_BACK
            )
            await self._release()

    async def rollback(self) -> None:
        if self._transaction is None:
            return
        try:
            with translate_storage_errors("rollback"):
                await self._transaction.rollback()
        finally:
            self.state = TransactionState.ROLLED_BACK
            await self._release()

    async def _release(self) -> None:
        connection = self._connection
        self._connection = None
        self._transaction = None
        if connection is not None:
            await connection.close()

    async def __aenter__(self) -> "UnitOfWork":
        await self.begin()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            logger.warning(
                f"Rolling back unit of work after {exc_type.__name__}",
            )
            await self.rollback()
            return
        await self.commit()

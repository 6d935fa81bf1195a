"""Database Pool — the process-wide async engine with bounded connection pooling.

Invariants:
    - Exactly one DatabasePool per process, created in the FastAPI lifespan and
      passed explicitly to whatever builds repositories (no module-level singleton)
    - Pool bounds: pool_size idle connections, pool_size + max_overflow open,
      pool_recycle seconds max lifetime, pool_timeout seconds to wait for a checkout
    - pool_pre_ping detects stale connections before they reach a query

Design Decisions:
    - Bursts queue on pool_timeout instead of opening unbounded connections
    - create_schema() exists for tests and local runs; it is not migration tooling
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import QueuePool

from congregation.db.base import Base
from congregation.infrastructure.query_executor import QueryExecutor
from congregation.infrastructure.unit_of_work import UnitOfWork
import congregation.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


class DatabasePool:
    """Owns the AsyncEngine; hands out executors and units of work over it."""

    def __init__(
        self, engine: AsyncEngine, query_timeout_seconds: float | None = None,
    ):
        self.engine = engine
        self.query_timeout_seconds = query_timeout_seconds

    @classmethod
    def from_url(
        cls,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 20,
        pool_recycle: int = 300,
        pool_timeout: float = 30.0,
        query_timeout_seconds: float | None = None,
    ) -> "DatabasePool":
        """Build the bounded engine for `database_url`."""
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=pool_recycle,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )
        return cls(engine, query_timeout_seconds=query_timeout_seconds)

    def executor(self) -> QueryExecutor:
        """Auto-committing executor: each call is its own transaction."""
        return QueryExecutor(
            self.engine, timeout_seconds=self.query_timeout_seconds,
        )

    def unit_of_work(self) -> UnitOfWork:
        return UnitOfWork(
            self.engine, timeout_seconds=self.query_timeout_seconds,
        )

    async def create_schema(self) -> None:
        """Create users and church_members if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def pool_status(self) -> dict[str, int]:
        """Checkout counters of the connection pool; empty for unpooled engines."""
        pool = self.engine.pool
        if not isinstance(pool, QueuePool):
            return {}
        return {
            "size": pool.size(),
            "checked_out": pool.checkedout(),
            "idle": pool.checkedin(),
            "overflow": pool.overflow(),
        }

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()

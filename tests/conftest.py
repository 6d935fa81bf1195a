"""Root conftest — shared database fixtures.

Invariants:
    - Every test gets a fresh SQLite file database under tmp_path with the schema created
    - Tests never reach a real Postgres server

Design Decisions:
    - File database instead of :memory: so concurrent connections see the same data
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from congregation.infrastructure.database import DatabasePool

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)


@pytest.fixture
async def database(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'congregation.db'}", echo=False,
    )
    pool = DatabasePool(engine)
    await pool.create_schema()
    yield pool
    await pool.dispose()


@pytest.fixture
def executor(database):
    return database.executor()

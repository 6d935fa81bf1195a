"""User Repository — CRUD for the users table on top of QueryExecutor.

Invariants:
    - create returns the storage-assigned id (INSERT ... RETURNING id)
    - get_by_id/get_by_email return None when no row matches
    - list is ordered by ascending id
    - update touches name and email only; created_at is never rewritten
"""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncResult

from congregation.core.domain_types import UserId
from congregation.core.entities import User, utc_now
from congregation.core.errors import PersistenceError
from congregation.infrastructure.query_executor import QueryExecutor
from congregation.models.user import UserModel

_users = UserModel.__table__


def _user_from_row(row: Row) -> User:
    return User(
        id=UserId(row.id),
        name=row.name,
        email=row.email,
        created_at=row.created_at,
    )


async def _collect_users(result: AsyncResult) -> list[User]:
    return [_user_from_row(row) async for row in result]


class UserRepository:
    """Persistence for User records."""

    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    async def create(self, user: User) -> UserId:
        new_id = await self._executor.fetch_one(
            insert(_users)
            .values(
                name=user.name,
                email=user.email,
                created_at=user.created_at or utc_now(),
            )
            .returning(_users.c.id),
            lambda row: UserId(row.id),
        )
        if new_id is None:
            raise PersistenceError("insert returned no id", "create")
        return new_id

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self._executor.fetch_one(
            select(_users).where(_users.c.id == user_id),
            _user_from_row,
        )

    async def get_by_email(self, email: str) -> User | None:
        return await self._executor.fetch_one(
            select(_users).where(_users.c.email == email),
            _user_from_row,
        )

    async def update(self, user: User) -> None:
        await self._executor.execute(
            update(_users)
            .where(_users.c.id == user.id)
            .values(name=user.name, email=user.email),
        )

    async def delete(self, user_id: UserId) -> None:
        await self._executor.execute(
            delete(_users).where(_users.c.id == user_id),
        )

    async def list(self) -> list[User]:
        return await self._executor.fetch_many(
            select(_users).order_by(_users.c.id.asc()),
            _collect_users,
        )

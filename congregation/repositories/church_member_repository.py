"""ChurchMember Repository — CRUD and joined-date range queries for church_members.

Invariants:
    - create writes created_at == updated_at and returns the storage-assigned id
    - get_by_id/get_by_email return None when no row matches
    - update rewrites contact fields and refreshes updated_at; joined_at and created_at are untouched
    - list and list_by_joined_range order by joined_at descending (id descending on ties)
    - list_by_joined_range bounds are both inclusive; the caller widens `end` if it wants whole days
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncResult

from congregation.core.domain_types import MemberId
from congregation.core.entities import ChurchMember, naive_utc_now
from congregation.core.errors import PersistenceError
from congregation.infrastructure.query_executor import QueryExecutor
from congregation.models.church_member import ChurchMemberModel

_members = ChurchMemberModel.__table__

_NEWEST_FIRST = (_members.c.joined_at.desc(), _members.c.id.desc())


def _member_from_row(row: Row) -> ChurchMember:
    return ChurchMember(
        id=MemberId(row.id),
        name=row.name,
        email=row.email,
        phone=row.phone,
        address=row.address,
        biography=row.biography,
        joined_at=row.joined_at,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


async def _collect_members(result: AsyncResult) -> list[ChurchMember]:
    return [_member_from_row(row) async for row in result]


class ChurchMemberRepository:
    """Persistence for ChurchMember records."""

    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    async def create(self, member: ChurchMember) -> MemberId:
        created_at = member.created_at or naive_utc_now()
        new_id = await self._executor.fetch_one(
            insert(_members)
            .values(
                name=member.name,
                email=member.email,
                phone=member.phone,
                address=member.address,
                biography=member.biography,
                joined_at=member.joined_at or created_at,
                created_at=created_at,
                updated_at=created_at,
            )
            .returning(_members.c.id),
            lambda row: MemberId(row.id),
        )
        if new_id is None:
            raise PersistenceError("insert returned no id", "create")
        return new_id

    async def get_by_id(self, member_id: MemberId) -> ChurchMember | None:
        return await self._executor.fetch_one(
            select(_members).where(_members.c.id == member_id),
            _member_from_row,
        )

    async def get_by_email(self, email: str) -> ChurchMember | None:
        return await self._executor.fetch_one(
            select(_members).where(_members.c.email == email),
            _member_from_row,
        )

    async def update(self, member: ChurchMember) -> None:
        await self._executor.execute(
            update(_members)
            .where(_members.c.id == member.id)
            .values(
                name=member.name,
                email=member.email,
                phone=member.phone,
                address=member.address,
                biography=member.biography,
                updated_at=naive_utc_now(),
            ),
        )

    async def delete(self, member_id: MemberId) -> None:
        await self._executor.execute(
            delete(_members).where(_members.c.id == member_id),
        )

    async def list(self) -> list[ChurchMember]:
        return await self._executor.fetch_many(
            select(_members).order_by(*_NEWEST_FIRST),
            _collect_members,
        )

    async def list_by_joined_range(
        self, start: datetime, end: datetime,
    ) -> list[ChurchMember]:
        return await self._executor.fetch_many(
            select(_members)
            .where(_members.c.joined_at >= start)
            .where(_members.c.joined_at <= end)
            .order_by(*_NEWEST_FIRST),
            _collect_members,
        )

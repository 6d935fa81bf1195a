"""Boundary Protocols — persistence contracts the services depend on.

Invariants:
    - Services NEVER import concrete repositories — they accept anything matching these Protocols
    - Single-row reads return None when no row matches; every other failure raises PersistenceError
    - All methods are async because implementations do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from congregation.core.domain_types import MemberId, UserId
from congregation.core.entities import ChurchMember, User


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(self, user: User) -> UserId: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def update(self, user: User) -> None: ...
    async def delete(self, user_id: UserId) -> None: ...
    async def list(self) -> list[User]: ...


class ChurchMemberRepository(Protocol):
    """Contract for church member persistence."""
    async def create(self, member: ChurchMember) -> MemberId: ...
    async def get_by_id(self, member_id: MemberId) -> ChurchMember | None: ...
    async def get_by_email(self, email: str) -> ChurchMember | None: ...
    async def update(self, member: ChurchMember) -> None: ...
    async def delete(self, member_id: MemberId) -> None: ...
    async def list(self) -> list[ChurchMember]: ...
    async def list_by_joined_range(
        self, start: datetime, end: datetime,
    ) -> list[ChurchMember]: ...

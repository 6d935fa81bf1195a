"""User Service — the same create/update/delete rules as members, for generic users.

Invariants:
    - name and email are trimmed in place first; name 1-255, email required and format-checked
    - create: duplicate email -> ConflictError; created_at defaults to now (aware UTC)
    - update: positive id, existing row, uniqueness lookup only on email change
    - delete: positive id, idempotent
"""

from __future__ import annotations

import logging

from congregation.core.domain_types import EntityKind, UserId
from congregation.core.entities import User, trim_identity, utc_now
from congregation.core.enforce_rules import check_id, validate_user
from congregation.core.errors import ConflictError, NotFoundError
from congregation.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)

_ENTITY = EntityKind.USER.value


class UserService:
    """Business rules for users. Persistence is delegated to the repository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def create(self, user: User) -> UserId:
        trim_identity(user)
        error = validate_user(user)
        if error:
            raise error

        if await self._repository.get_by_email(user.email) is not None:
            raise ConflictError(_ENTITY, "email", user.email)

        if user.created_at is None:
            user.created_at = utc_now()

        user_id = await self._repository.create(user)
        logger.info(
            f"User {user_id} created",
            extra={"entity": _ENTITY, "entity_id": user_id},
        )
        return user_id

    async def get_by_id(self, user_id: UserId) -> User | None:
        error = check_id(user_id, "user")
        if error:
            raise error
        return await self._repository.get_by_id(user_id)

    async def update(self, user: User) -> None:
        trim_identity(user)
        error = check_id(user.id, "user") or validate_user(user)
        if error:
            raise error

        existing = await self._repository.get_by_id(user.id)
        if existing is None:
            raise NotFoundError(_ENTITY, user.id)

        if user.email != existing.email:
            if await self._repository.get_by_email(user.email) is not None:
                raise ConflictError(_ENTITY, "email", user.email)

        await self._repository.update(user)

    async def delete(self, user_id: UserId) -> None:
        error = check_id(user_id, "user")
        if error:
            raise error
        await self._repository.delete(user_id)

    async def list(self) -> list[User]:
        return await self._repository.list()

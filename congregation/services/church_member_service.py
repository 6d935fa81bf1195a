"""ChurchMember Service — validation, email uniqueness and defaults around the repository.

Invariants:
    - Validation runs before any storage access; failures raise ValidationError
    - create: duplicate email -> ConflictError; joined_at/created_at default to now when unset
    - update: positive id, valid fields, existing row (else NotFoundError); the email
      uniqueness lookup runs only when the email changed
    - delete: positive id, no existence check, so deleting a missing id succeeds
    - list_by_joined_range: start > end -> ValidationError; no limit on range width
    - Caller-supplied datetimes are normalized to naive UTC before they reach storage
    - name and email are trimmed before validation, so lookups and writes see the checked value

Design Decisions:
    - The email pre-check is not atomic with the write; under concurrent creates the
      unique constraint raises PersistenceError, which is the authoritative signal
"""

from __future__ import annotations

import logging
from datetime import datetime

from congregation.core.domain_types import EntityKind, MemberId
from congregation.core.entities import (
    ChurchMember, as_naive_utc, naive_utc_now, trim_identity,
)
from congregation.core.enforce_rules import check_date_range, check_id, validate_member
from congregation.core.errors import ConflictError, NotFoundError
from congregation.core.repository_protocols import ChurchMemberRepository

logger = logging.getLogger(__name__)

_ENTITY = EntityKind.CHURCH_MEMBER.value


class ChurchMemberService:
    """Business rules for church members."""

    def __init__(self, repository: ChurchMemberRepository):
        self._repository = repository

    async def create(self, member: ChurchMember) -> MemberId:
        """Validate and persist a new member, returning the new id."""
        trim_identity(member)
        error = validate_member(member)
        if error:
            raise error

        existing = await self._repository.get_by_email(member.email)
        if existing is not None:
            raise ConflictError(_ENTITY, "email", member.email)

        now = naive_utc_now()
        member.joined_at = as_naive_utc(member.joined_at) if member.joined_at else now
        if member.created_at is None:
            member.created_at = now

        member_id = await self._repository.create(member)
        logger.info(
            f"Church member {member_id} created",
            extra={"entity": _ENTITY, "entity_id": member_id},
        )
        return member_id

    async def get_by_id(self, member_id: MemberId) -> ChurchMember | None:
        error = check_id(member_id, "member")
        if error:
            raise error
        return await self._repository.get_by_id(member_id)

    async def update(self, member: ChurchMember) -> None:
        """Re-validate and persist changes to an existing member."""
        trim_identity(member)
        error = check_id(member.id, "member") or validate_member(member)
        if error:
            raise error

        existing = await self._repository.get_by_id(member.id)
        if existing is None:
            raise NotFoundError(_ENTITY, member.id)

        if member.email != existing.email:
            taken = await self._repository.get_by_email(member.email)
            if taken is not None:
                raise ConflictError(_ENTITY, "email", member.email)

        await self._repository.update(member)
        logger.info(
            f"Church member {member.id} updated",
            extra={"entity": _ENTITY, "entity_id": member.id},
        )

    async def delete(self, member_id: MemberId) -> None:
        error = check_id(member_id, "member")
        if error:
            raise error
        await self._repository.delete(member_id)

    async def list(self) -> list[ChurchMember]:
        return await self._repository.list()

    async def list_by_joined_range(
        self, start: datetime, end: datetime,
    ) -> list[ChurchMember]:
        """Members with start <= joined_at <= end, newest first."""
        start, end = as_naive_utc(start), as_naive_utc(end)
        error = check_date_range(start, end)
        if error:
            raise error
        return await self._repository.list_by_joined_range(start, end)

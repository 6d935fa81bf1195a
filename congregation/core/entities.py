"""Entities — in-memory records that repositories map rows into.

Invariants:
    - id is None until storage assigns it; never reassigned afterwards
    - ChurchMember timestamps are naive UTC; User.created_at is aware UTC
    - Optional member fields are None when absent (never empty-string placeholders)
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from congregation.core.domain_types import MemberId, UserId


@dataclass
class User:
    """Generic user record keyed by a unique email."""
    name: str
    email: str
    id: UserId | None = None
    created_at: datetime | None = None


@dataclass
class ChurchMember:
    """Church member record with contact details and membership dates."""
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    biography: str | None = None
    joined_at: datetime | None = None
    id: MemberId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def naive_utc_now() -> datetime:
    """Current time as naive UTC, for `timestamp without time zone` columns."""
    return utc_now().replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def trim_identity(record: User | ChurchMember) -> None:
    """Strip name and email in place so lookups and writes see the validated form."""
    record.name = (record.name or "").strip()
    record.email = (record.email or "").strip()

"""Rule Enforcement — structural validation for users, members, ids and date ranges.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a ValidationError on violation, None on success (services raise it)
    - validate_* functions chain the check_* functions — first error wins
    - Lengths are measured on the trimmed value for name and email

Design Decisions:
    - Return errors instead of raising: rules compose and test without pytest.raises
    - The email pattern is permissive (not RFC 5322); it rejects obvious garbage only
"""

import re
from datetime import datetime

from congregation.core.domain_types import (
    ADDRESS_MAX,
    BIOGRAPHY_MAX,
    EMAIL_PATTERN,
    MEMBER_NAME_MAX,
    MEMBER_NAME_MIN,
    PHONE_MAX,
    USER_NAME_MAX,
)
from congregation.core.entities import ChurchMember, User
from congregation.core.errors import ValidationError

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_valid_email(email: str) -> bool:
    """True when email matches local@domain.tld."""
    return _EMAIL_RE.match(email) is not None


def check_id(entity_id: int | None, label: str) -> ValidationError | None:
    """Ids are storage-assigned positive integers."""
    if entity_id is None or entity_id <= 0:
        return ValidationError(f"invalid {label} id", "id")
    return None


def check_name(name: str | None, min_len: int, max_len: int) -> ValidationError | None:
    trimmed = (name or "").strip()
    if not trimmed:
        return ValidationError("name is required", "name")
    if len(trimmed) < min_len or len(trimmed) > max_len:
        return ValidationError(
            f"name must be between {min_len} and {max_len} characters", "name",
        )
    return None


def check_email(email: str | None) -> ValidationError | None:
    trimmed = (email or "").strip()
    if not trimmed:
        return ValidationError("email is required", "email")
    if not is_valid_email(trimmed):
        return ValidationError("invalid email format", "email")
    return None


def check_max_length(value: str | None, limit: int, field: str) -> ValidationError | None:
    """Optional fields: absent is fine, present must fit the column."""
    if value and len(value) > limit:
        return ValidationError(f"{field} must not exceed {limit} characters", field)
    return None


def check_date_range(start: datetime, end: datetime) -> ValidationError | None:
    """Range bounds are inclusive; equal bounds are allowed."""
    if start > end:
        return ValidationError("start date must be before end date", "start")
    return None


def validate_user(user: User) -> ValidationError | None:
    """Chain all user checks. Returns first error or None."""
    return (
        check_name(user.name, 1, USER_NAME_MAX)
        or check_email(user.email)
    )


def validate_member(member: ChurchMember) -> ValidationError | None:
    """Chain all church member checks. Returns first error or None."""
    return (
        check_name(member.name, MEMBER_NAME_MIN, MEMBER_NAME_MAX)
        or check_email(member.email)
        or check_max_length(member.phone, PHONE_MAX, "phone")
        or check_max_length(member.address, ADDRESS_MAX, "address")
        or check_max_length(member.biography, BIOGRAPHY_MAX, "biography")
    )

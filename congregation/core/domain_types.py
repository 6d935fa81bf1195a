"""Domain Types — identity types, transaction states and field limits.

Invariants:
    - UserId and MemberId wrap storage-assigned integers; valid ids are positive
    - TransactionState encodes the only legal Unit of Work states
    - Field limits match the church_members column widths

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log lines without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
MemberId = NewType("MemberId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TransactionState(str, Enum):
    """Unit of Work lifecycle: idle -> active -> committed | rolled_back."""
    IDLE = "idle"
    ACTIVE = "active"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class EntityKind(str, Enum):
    """Resource names used in error context and log lines."""
    USER = "User"
    CHURCH_MEMBER = "ChurchMember"


# ─── Field Limits ────────────────────────────────────────────────

USER_NAME_MAX = 255
MEMBER_NAME_MIN = 2
MEMBER_NAME_MAX = 255
PHONE_MAX = 20
ADDRESS_MAX = 500
BIOGRAPHY_MAX = 5000

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

"""User Table — persisted shape of the generic users resource.

Invariants:
    - id is a serial integer primary key assigned by storage
    - email carries a UNIQUE constraint (authoritative duplicate guard under races)
    - created_at is timezone-aware and defaults to now() server-side
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from congregation.db.base import Base


class UserModel(Base):
    """users table."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )

"""SQLAlchemy Declarative Base — shared base class for all table models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for the users and church_members tables
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all congregation table models."""
    pass

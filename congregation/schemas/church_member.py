"""ChurchMember Schemas — request bodies and responses for /api/v1/members.

Invariants:
    - name and email are stripped; optional text fields are passed through untouched
    - joined_at is optional on create (the service defaults it) and ignored on update
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class ChurchMemberWrite(BaseModel):
    """Body for POST and PUT /members."""
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    biography: str | None = None
    joined_at: datetime | None = None

    @field_validator("name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class ChurchMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    biography: str | None = None
    joined_at: datetime
    created_at: datetime
    updated_at: datetime

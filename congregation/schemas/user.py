"""User Schemas — request bodies and responses for /api/v1/users.

Invariants:
    - name and email are stripped of surrounding whitespace; length and format
      rules are enforced by the service, not here
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class UserWrite(BaseModel):
    """Body for POST and PUT /users."""
    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime | None = None


class CreatedResponse(BaseModel):
    """Id of a freshly created resource."""
    id: int

"""Link Schemas — Pydantic models for the link endpoints.

Invariants:
    - LinkCreate accepts missing/empty fields so the create handler can apply
      its ordered checks (presence, email, URL) itself
    - LinkResponse serializes with camelCase keys and includes ownerToken

Design Decisions:
    - No min_length on LinkCreate fields: an empty title must produce
      "All fields are required", not a generic field error
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkCreate(_CamelModel):
    """New link submission. userToken is optional."""
    title: str | None = None
    url: str | None = None
    description: str | None = None
    student_email: str | None = None
    user_token: str | None = None


class LinkDelete(_CamelModel):
    """Delete request body carrying the claimed owner token.

    Any JSON value is accepted; a non-string token never equals a stored one.
    """
    user_token: Any = None


class LinkResponse(_CamelModel):
    """Persisted link as returned to clients."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    title: str
    url: str
    description: str
    student_email: str
    created_at: datetime
    owner_token: str

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite returns naive datetimes; stored values are always UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MessageResponse(BaseModel):
    message: str

"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from threadboard.db.time import utcnow


class UserRecord(BaseModel):
    """Stored user as returned by either storage backend."""

    id: str
    username: str = Field(..., min_length=1, max_length=20)
    password_hash: str = Field(..., repr=False)
    created_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(from_attributes=True, frozen=True)

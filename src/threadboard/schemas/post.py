"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from threadboard.db.time import utcnow


class PostRecord(BaseModel):
    """Stored post as returned by either storage backend."""

    id: str
    text: str = Field(..., min_length=1)
    author_id: str
    commentable: bool = True
    created_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(from_attributes=True, frozen=True)

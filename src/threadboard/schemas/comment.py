"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from threadboard.db.time import utcnow


class CommentRecord(BaseModel):
    """Stored comment as returned by either storage backend.

    ``post_id`` always names the root post; ``parent_comment_id`` is only set
    for replies to another comment.
    """

    id: str
    comment: str = Field(..., min_length=1, max_length=2000)
    author_id: str
    post_id: str
    parent_comment_id: str | None = None
    created_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_reply(self) -> bool:
        """Return True when the comment answers another comment."""
        return self.parent_comment_id is not None

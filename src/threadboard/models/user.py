# src/threadboard/models/user.py
"""SQLAlchemy model for registered users."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from threadboard.db.session import Base
from threadboard.db.time import utcnow

USERNAME_MAX_LENGTH = 20


class User(Base):
    """Account identified by a UUID and a unique username."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH),
        unique=True,
        nullable=False,
    )
    # bcrypt output is always 60 characters.
    password_hash: Mapped[str] = mapped_column(
        String(60),
        nullable=False,
        name="password",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

"""
User model for authentication.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID

USERNAME_MAX_LENGTH = 50


class User(BaseModel):
    """User account with username/password auth.

    Usernames are unique at the database level; that constraint is the only
    guard against duplicate registration.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=uuid.uuid4)

    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(
            f"length(username) <= {USERNAME_MAX_LENGTH}", name="ck_users_username_len"
        ),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"

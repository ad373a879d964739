# Note model for user content
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 1000
# id column is a 32-bit signed INTEGER
NOTE_ID_MAX = 2**31 - 1


class Note(BaseModel):
    """Note with title and content.

    Notes belong to a single shared pool; there is no owner column.
    ``created_at`` and ``updated_at`` have no column defaults or onupdate
    hooks, NoteService writes both explicitly.
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("idx_notes_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"

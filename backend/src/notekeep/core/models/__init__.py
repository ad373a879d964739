"""
Database models for NoteKeep application.

SQLAlchemy ORM models that define the database schema. All models are
used through the async repositories in ``core.repositories``.

Models included:
    - User: User account with username/password authentication
    - Note: Note title and content with creation/update timestamps
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]

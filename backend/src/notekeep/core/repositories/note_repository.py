"""Note repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations.

    Each write commits on its own, so a single create/update/delete either
    fully applies or not at all.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note; the database allocates the id."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, note_id: int) -> bool:
        """Check if a note with this id exists."""
        stmt = select(func.count(Note.id)).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def list_notes(self) -> List[Note]:
        """Get all notes in insertion order."""
        stmt = select(Note).order_by(Note.id)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_note(self, note_id: int, update_data: dict) -> Optional[Note]:
        """Overwrite the given fields of a note."""
        note = await self.get_by_id(note_id)
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: int) -> bool:
        """Delete note permanently."""
        note = await self.get_by_id(note_id)
        if not note:
            logger.warning(f"Note {note_id} not found for deletion")
            return False

        try:
            await self.session.delete(note)
            await self.session.commit()
        except Exception as e:
            logger.error(f"Unexpected error deleting note {note_id}: {e}")
            await self.session.rollback()
            raise

        logger.info(f"Deleted note {note_id}")
        return True

    async def search_notes(self, keyword: str, page: int, size: int) -> tuple[List[Note], int]:
        """Page through notes whose title or content contains ``keyword``.

        ``%`` and ``_`` in the keyword match literally. Case sensitivity
        follows the database's LIKE semantics.
        """
        condition = or_(
            Note.title.contains(keyword, autoescape=True),
            Note.content.contains(keyword, autoescape=True),
        )

        count_stmt = select(func.count(Note.id)).where(condition)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        stmt = select(Note).where(condition).order_by(Note.id).offset(page * size).limit(size)
        result = await self.session.execute(stmt)
        notes = list(result.scalars())

        return notes, total_count

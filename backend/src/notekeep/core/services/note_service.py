"""Note service implementation."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidArgumentError, NotFoundError
from ..logging import get_logger
from ..models.note import CONTENT_MAX_LENGTH, NOTE_ID_MAX, TITLE_MAX_LENGTH
from ..repositories.note_repository import NoteRepository
from ..schemas.common import Page
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = get_logger("notes")

# LIMIT and OFFSET are bound as signed 64-bit integers
MAX_OFFSET = 2**63 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NoteService(INoteService):
    """Note service implementation.

    Lifecycle of a note: created (``updated_at`` unset), updated any number
    of times (``updated_at`` set on each), deleted for good. All validation
    runs before the repository is called.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def get_all_notes(self) -> List[NoteResponse]:
        """List every note in insertion order."""
        logger.info("Fetching all notes")
        notes = await self.note_repo.list_notes()
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, note_id: Optional[int]) -> NoteResponse:
        """Get note by ID."""
        self._validate_id(note_id)

        note = await self.note_repo.get_by_id(note_id)
        if not note:
            logger.warning("Attempt to read missing note", extra={"note_id": note_id})
            raise NotFoundError(f"Note with id {note_id} does not exist")

        return NoteResponse.model_validate(note)

    async def create_note(self, request: Optional[NoteCreate]) -> NoteResponse:
        """Create new note."""
        if request is None:
            raise InvalidArgumentError("Note cannot be null")
        self._validate_fields(request.title, request.content)

        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "created_at": _utcnow(),
                "updated_at": None,
            }
        )
        logger.info("Created note", extra={"note_id": note.id})

        return NoteResponse.model_validate(note)

    async def update_note(self, request: Optional[NoteUpdate]) -> NoteResponse:
        """Overwrite title and content of an existing note."""
        if request is None:
            raise InvalidArgumentError("Note cannot be null")
        if request.id is None:
            raise InvalidArgumentError("Note id cannot be null")
        self._validate_id(request.id)

        logger.info("Updating note", extra={"note_id": request.id})
        if not await self.note_repo.exists(request.id):
            raise NotFoundError(f"Note with id {request.id} does not exist")

        self._validate_fields(request.title, request.content)

        note = await self.note_repo.update_note(
            request.id,
            {
                "title": request.title,
                "content": request.content,
                "updated_at": _utcnow(),
            },
        )
        if not note:
            # deleted between the existence check and the write
            raise NotFoundError(f"Note with id {request.id} does not exist")

        return NoteResponse.model_validate(note)

    async def delete_note(self, note_id: Optional[int]) -> None:
        """Delete note permanently."""
        self._validate_id(note_id)

        if not await self.note_repo.delete_note(note_id):
            raise NotFoundError(f"Note with id {note_id} does not exist")

        logger.info("Deleted note", extra={"note_id": note_id})

    async def search_notes(
        self, keyword: Optional[str], page: int = 0, size: int = 10
    ) -> Page[NoteResponse]:
        """Search notes whose title or content contains ``keyword``.

        A blank keyword yields an empty page rather than every note.
        """
        logger.info("Searching notes", extra={"keyword": keyword, "page": page, "size": size})
        if (
            page is None
            or size is None
            or page < 0
            or size <= 0
            or size > MAX_OFFSET
            or page * size > MAX_OFFSET
        ):
            raise InvalidArgumentError(
                "Pagination parameters are not valid",
                details={"page": page, "size": size},
            )

        if keyword is None or not keyword.strip():
            logger.info("No keyword provided, returning empty page")
            return Page[NoteResponse].empty(page=page, size=size)

        notes, total = await self.note_repo.search_notes(keyword, page, size)

        return Page[NoteResponse].create(
            items=[NoteResponse.model_validate(note) for note in notes],
            total=total,
            page=page,
            size=size,
        )

    def _validate_id(self, note_id: Optional[int]) -> None:
        # bool is an int subclass but never a valid id
        if note_id is None or isinstance(note_id, bool) or not isinstance(note_id, int):
            raise InvalidArgumentError("The provided id is not valid")
        if note_id <= 0 or note_id > NOTE_ID_MAX:
            raise InvalidArgumentError("The provided id is not valid")

    def _validate_fields(self, title: Optional[str], content: Optional[str]) -> None:
        if title is None or not title.strip():
            raise InvalidArgumentError("Note title cannot be empty")
        if len(title) > TITLE_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Note title cannot exceed {TITLE_MAX_LENGTH} characters"
            )
        if content is None or not content.strip():
            raise InvalidArgumentError("Note content cannot be empty")
        if len(content) > CONTENT_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Note content cannot exceed {CONTENT_MAX_LENGTH} characters"
            )

"""Notes API endpoints. Every route requires a token with ROLE_USER."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.exceptions import NotFoundError
from ..core.schemas.notes import NoteCreate, NotePage, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import require_user

router = APIRouter(prefix="/notes", tags=["notes"], dependencies=[Depends(require_user)])


@router.get("", response_model=List[NoteResponse])
async def list_notes(session: AsyncSession = Depends(get_db_session)):
    """List all notes."""
    note_service = NoteService(session)
    return await note_service.get_all_notes()


# declared before /{note_id} so "search" is not parsed as an id
@router.get("/search", response_model=NotePage)
async def search_notes(
    query: Optional[str] = Query(None, description="Substring to look for in title or content"),
    page: int = Query(0, description="Zero-based page number"),
    size: Optional[int] = Query(None, description="Page size, defaults to DEFAULT_PAGE_SIZE"),
    session: AsyncSession = Depends(get_db_session),
):
    """Search notes by title or content with pagination."""
    if size is None:
        size = get_settings().default_page_size
    note_service = NoteService(session)
    result = await note_service.search_notes(query, page, size)
    if result.is_empty:
        raise NotFoundError("No notes found")
    return result


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: int, session: AsyncSession = Depends(get_db_session)):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(request: NoteCreate, session: AsyncSession = Depends(get_db_session)):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(request)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    request: NoteUpdate,
    session: AsyncSession = Depends(get_db_session),
):
    """Replace title and content of a note."""
    note_service = NoteService(session)
    return await note_service.update_note(request.model_copy(update={"id": note_id}))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: int, session: AsyncSession = Depends(get_db_session)):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

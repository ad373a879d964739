"""
Service interfaces for NoteKeep application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.user import User
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from ..schemas.common import HealthCheckResponse, Page
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for user registration and login."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        pass

    @abstractmethod
    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Check credentials, returning the user or None."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> TokenResponse:
        """Exchange credentials for a signed access token."""
        pass


class INoteService(ABC):
    """Note service for CRUD and search."""

    @abstractmethod
    async def get_all_notes(self) -> List[NoteResponse]:
        """List every note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: Optional[int]) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, request: Optional[NoteCreate]) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, request: Optional[NoteUpdate]) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: Optional[int]) -> None:
        """Delete note."""
        pass

    @abstractmethod
    async def search_notes(
        self, keyword: Optional[str], page: int = 0, size: int = 10
    ) -> Page[NoteResponse]:
        """Search notes by title or content substring."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

"""Authentication service implementation."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import (
    create_access_token,
    dummy_verify,
    hash_password,
    needs_update,
    verify_password,
)
from ..exceptions import InvalidArgumentError, UnauthorizedError
from ..logging import get_logger
from ..models.user import USERNAME_MAX_LENGTH, User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from .interfaces import IAuthService

logger = get_logger("auth")


def _normalize_username(username: Optional[str]) -> str:
    return (username or "").strip()


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user.

        Username collisions are left to the store's unique constraint,
        which surfaces as DuplicateKeyError.
        """
        if request is None:
            raise InvalidArgumentError("Registration data is required")

        username = _normalize_username(request.username)
        if not username:
            raise InvalidArgumentError("Username cannot be empty")
        if len(username) > USERNAME_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Username cannot exceed {USERNAME_MAX_LENGTH} characters"
            )
        if not request.password or not request.password.strip():
            raise InvalidArgumentError("Password cannot be empty")

        user = await self.user_repo.create_user(
            {"username": username, "password_hash": hash_password(request.password)}
        )
        logger.info("Registered user", extra={"username": user.username})

        return UserResponse.model_validate(user)

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user when the password matches, None otherwise.

        The username is trimmed as on registration. An unknown username and
        a wrong password are indistinguishable to the caller, including in
        timing.
        """
        username = _normalize_username(username)
        user = await self.user_repo.get_by_username(username) if username else None
        if user is None:
            dummy_verify()
            return None

        if not verify_password(password or "", user.password_hash):
            return None

        if needs_update(user.password_hash):
            logger.info("Upgrading password hash", extra={"username": user.username})
            user = await self.user_repo.update_password_hash(user, hash_password(password))

        return user

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a signed access token."""
        user = await self.authenticate(request.username, request.password)
        if user is None:
            logger.warning("Failed login attempt")
            raise UnauthorizedError("Invalid credentials")

        logger.info("User logged in", extra={"username": user.username})
        return TokenResponse(
            token=create_access_token(user.username),
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
        )

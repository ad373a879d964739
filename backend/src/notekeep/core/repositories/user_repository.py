"""User repository for database operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import DuplicateKeyError
from ..models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user.

        The password hash is stored as given. A username collision is
        reported by the unique constraint and raised as DuplicateKeyError.
        """
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Username already registered: %s", user_data.get("username"))
            raise DuplicateKeyError(
                f"Username '{user_data.get('username')}' is already taken"
            ) from e
        await self.session.refresh(user)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_password_hash(self, user: User, password_hash: str) -> User:
        """Replace the stored hash, used when a login upgrades an old hash."""
        user.password_hash = password_hash
        await self.session.commit()
        await self.session.refresh(user)
        return user

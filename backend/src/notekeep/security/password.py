"""Password hashing utilities.

Only salted one-way hashes are ever stored. ``bcrypt_sha256`` pre-hashes
with SHA-256, so passwords longer than bcrypt's 72-byte limit keep all of
their characters significant.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a freshly salted hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True when ``plain_password`` matches the stored hash.

    A stored value that is not a recognised hash never matches.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be identified")
        return False


def dummy_verify() -> None:
    """Spend the time of a real verify when there is no stored hash."""
    pwd_context.dummy_verify()


def needs_update(hashed_password: str) -> bool:
    """True when the hash was made with outdated scheme settings."""
    return pwd_context.needs_update(hashed_password)

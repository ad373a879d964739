"""Middleware for authentication and other cross-cutting concerns."""

from .auth import USER_ROLE, JWTBearer, RoleChecker, require_role, require_user

__all__ = [
    "USER_ROLE",
    "JWTBearer",
    "RoleChecker",
    "require_role",
    "require_user",
]

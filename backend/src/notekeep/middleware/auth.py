"""Authentication middleware.

Every notes route depends on ``require_user``: the bearer token is
verified, its expiry checked against the clock, and its role claim
checked by ``require_role``. Any failure rejects the request before the
note service runs.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import ForbiddenError, TokenError, UnauthorizedError
from ..core.logging import get_logger
from ..core.schemas.auth import TokenClaims
from ..security import decode_access_token, is_token_expired

USER_ROLE = "ROLE_USER"

logger = get_logger("access")


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication returning the verified claims."""

    def __init__(self):
        super(JWTBearer, self).__init__(auto_error=False)

    async def __call__(self, request: Request) -> TokenClaims:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise UnauthorizedError("Missing bearer token")
        if credentials.scheme.lower() != "bearer":
            raise UnauthorizedError("Invalid authentication scheme")

        try:
            claims = decode_access_token(credentials.credentials)
        except TokenError as e:
            logger.warning("Rejected token", extra={"reason": e.message, "path": request.url.path})
            raise UnauthorizedError("Invalid token") from e

        if is_token_expired(claims):
            logger.info("Rejected expired token", extra={"path": request.url.path})
            raise UnauthorizedError("Token has expired")

        return claims


def require_role(claims: TokenClaims, role: str) -> TokenClaims:
    """Guard: pass the claims through if they carry ``role``."""
    if not claims.has_role(role):
        raise ForbiddenError(f"Role {role} is required")
    return claims


class RoleChecker:
    """Dependency verifying the token and then the required role."""

    def __init__(self, role: str):
        self.role = role

    async def __call__(self, claims: TokenClaims = Depends(JWTBearer())) -> TokenClaims:
        return require_role(claims, self.role)


require_user = RoleChecker(USER_ROLE)

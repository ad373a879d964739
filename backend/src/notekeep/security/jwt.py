"""JWT token utilities.

Tokens are self-contained: verification needs only the token, the signing
key and the clock, so any process holding the same ``secret_key`` can
verify them. Rotating the key invalidates every outstanding token.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import get_settings
from ..core.exceptions import InvalidSignatureError, MalformedTokenError
from ..core.schemas.auth import TokenClaims

DEFAULT_ROLES = ("ROLE_USER",)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(username: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed access token for ``username`` carrying the user role."""
    settings = get_settings()
    issued_at = _utcnow()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": username,
        "roles": list(DEFAULT_ROLES),
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_delta).timestamp()),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def _claims_from_payload(payload: Dict[str, Any]) -> TokenClaims:
    subject = payload.get("sub")
    roles = payload.get("roles", [])
    iat = payload.get("iat")
    exp = payload.get("exp")

    if not isinstance(subject, str) or not subject:
        raise MalformedTokenError("Token has no subject")
    if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
        raise MalformedTokenError("Token roles claim must be a list of strings")
    # bool is an int subclass, reject it explicitly
    for name, value in (("iat", iat), ("exp", exp)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedTokenError(f"Token {name} claim must be a numeric timestamp")

    # NaN, infinities and far-out values are not representable datetimes
    try:
        issued_at = datetime.fromtimestamp(iat, tz=timezone.utc)
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedTokenError("Token timestamp is out of range") from e

    return TokenClaims(
        subject=subject,
        roles=tuple(roles),
        issued_at=issued_at,
        expires_at=expires_at,
    )


def decode_access_token(token: str) -> TokenClaims:
    """Verify the signature of ``token`` and return its claims.

    Raises MalformedTokenError when the token cannot be parsed and
    InvalidSignatureError when it parses but was not signed with our key.
    Expiry is not checked here, see ``is_token_expired``.
    """
    if not isinstance(token, str) or not token:
        raise MalformedTokenError("Token is empty")

    settings = get_settings()

    try:
        jwt.get_unverified_header(token)
        unverified = jwt.get_unverified_claims(token)
    except JWTError as e:
        raise MalformedTokenError(f"Malformed token: {e}") from e

    # shape errors are reported before signature errors
    _claims_from_payload(unverified)

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"verify_exp": False, "verify_iat": False, "verify_nbf": False},
        )
    except JWTError as e:
        raise InvalidSignatureError() from e

    return _claims_from_payload(payload)


def is_token_expired(claims: TokenClaims, now: Optional[datetime] = None) -> bool:
    """True when the token expiry lies strictly before ``now``."""
    return claims.expires_at < (now or _utcnow())


def get_username_from_token(token: str) -> Optional[str]:
    """Subject of a valid, unexpired token, or None."""
    try:
        claims = decode_access_token(token)
    except (MalformedTokenError, InvalidSignatureError):
        return None
    if is_token_expired(claims):
        return None
    return claims.subject

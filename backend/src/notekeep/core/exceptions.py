"""
Application exceptions.

Every failure a caller can observe maps to one stable error kind. The
exception handlers in ``exception_handlers.py`` turn these into
``ErrorResponse`` payloads with the matching HTTP status.
"""


class NoteKeepError(Exception):
    """Base exception for all application errors."""

    code = "INTERNAL"
    status_code = 500

    def __init__(self, message: str = "Unexpected error") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(NoteKeepError):
    """Malformed id, bad pagination, blank or oversized fields."""

    code = "INVALID_ARGUMENT"
    status_code = 400

    def __init__(self, message: str = "Invalid argument", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class NotFoundError(NoteKeepError):
    """Raised when a note or user does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class UnauthorizedError(NoteKeepError):
    """Missing, malformed, expired token or bad credentials."""

    code = "UNAUTHORIZED"
    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(NoteKeepError):
    """Valid token without the role the operation requires."""

    code = "FORBIDDEN"
    status_code = 403

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message)


class DuplicateKeyError(NoteKeepError):
    """Unique constraint violation in the store (username collision)."""

    code = "DUPLICATE_KEY"
    status_code = 400

    def __init__(self, message: str = "Duplicate key") -> None:
        super().__init__(message)


class TokenError(UnauthorizedError):
    """Base for token verification failures."""

    code = "UNAUTHORIZED"


class MalformedTokenError(TokenError):
    """Token cannot be parsed into a claim set."""

    def __init__(self, message: str = "Malformed token") -> None:
        super().__init__(message)


class InvalidSignatureError(TokenError):
    """Token parses but its signature does not match the signing key."""

    def __init__(self, message: str = "Invalid token signature") -> None:
        super().__init__(message)

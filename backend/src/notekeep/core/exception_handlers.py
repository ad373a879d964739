"""
Exception handlers.

Convert application exceptions and request parsing failures into the
``ErrorResponse`` format. Stack traces are logged, never returned.

Usage:
    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import InvalidArgumentError, NoteKeepError
from .logging import get_logger
from .schemas.common import ErrorResponse

logger = get_logger("errors")


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))


async def application_error_handler(request: Request, exc: NoteKeepError) -> JSONResponse:
    """Handle every NoteKeepError subclass with its own status code."""
    log_extra = {
        "code": exc.code,
        "error_message": exc.message,
        "status": exc.status_code,
        "path": request.url.path,
        "method": request.method,
    }
    if exc.status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    details = getattr(exc, "details", None) or None
    headers = None
    if exc.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}

    response = _error_response(
        exc.status_code, ErrorResponse(error=exc.code, message=exc.message, details=details)
    )
    if headers:
        response.headers.update(headers)
    return response


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/path/query failed to parse: report it as 400 like any bad input."""
    details = {
        "validation_errors": [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "message": err.get("msg", "Validation error"),
                "type": err.get("type", "unknown"),
            }
            for err in exc.errors()
        ]
    }
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "method": request.method, "errors": len(exc.errors())},
    )
    return _error_response(
        InvalidArgumentError.status_code,
        ErrorResponse(
            error=InvalidArgumentError.code,
            message="Request is malformed or has invalid fields",
            details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unanticipated becomes a generic 500."""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return _error_response(
        NoteKeepError.status_code,
        ErrorResponse(error=NoteKeepError.code, message="Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(NoteKeepError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

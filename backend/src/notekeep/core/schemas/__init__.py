"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes and common
responses (pagination and error formats).
"""

from .auth import LoginRequest, RegisterRequest, TokenClaims, TokenResponse, UserResponse
from .common import ErrorResponse, HealthCheckResponse, Page
from .notes import NoteCreate, NotePage, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "TokenClaims",
    "TokenResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NotePage",
    # Common schemas
    "Page",
    "ErrorResponse",
    "HealthCheckResponse",
]

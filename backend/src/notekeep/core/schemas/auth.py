"""
Authentication and authorization schemas.

These schemas define the API contracts for user registration, login
and the decoded claim set of a signed access token.
"""

import uuid
from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "password": "securepassword123",
            }
        }
    )


class RegisterRequest(BaseModel):
    """User registration request schema.

    Field rules (non-blank username up to 50 chars, non-blank password) are
    enforced by AuthService so a bad request maps to INVALID_ARGUMENT.
    """

    username: Optional[str] = Field(default=None, description="Unique username")
    password: Optional[str] = Field(default=None, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "password": "securepassword123",
            }
        }
    )


class TokenResponse(BaseModel):
    """Login response carrying the signed access token."""

    token: str = Field(description="Signed JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        }
    )


class UserResponse(BaseModel):
    """User information response schema. Never carries the password hash."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    created_at: Optional[datetime] = Field(default=None, description="Account creation timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "pippo",
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )


class TokenClaims(BaseModel):
    """Verified claim set of an access token."""

    model_config = ConfigDict(frozen=True)

    subject: str
    roles: Tuple[str, ...]
    issued_at: datetime
    expires_at: datetime

    def has_role(self, role: str) -> bool:
        return role in self.roles

"""
Shared response schemas - pagination, errors etc
"""

from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')


class Page(BaseModel, Generic[T]):
    """One zero-indexed slice of a larger result set plus total count."""

    model_config = ConfigDict(frozen=True)

    items: List[T]
    total: int
    page: int
    size: int
    pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def create(cls, items: List[T], total: int, page: int, size: int) -> "Page[T]":
        # calculate page info
        pages = (total + size - 1) // size if size > 0 else 0

        return cls(
            items=items,
            total=total,
            page=page,
            size=size,
            pages=pages,
            has_next=page + 1 < pages,
            has_prev=page > 0,
        )

    @classmethod
    def empty(cls, page: int, size: int) -> "Page[T]":
        return cls.create(items=[], total=0, page=page, size=size)

    @property
    def is_empty(self) -> bool:
        return not self.items


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Stable error kind")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Error timestamp"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "NOT_FOUND",
                "message": "Note with id 999 does not exist",
                "details": None,
                "timestamp": "2025-09-13T17:23:45Z",
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {
                        "status": "healthy",
                        "response_time_ms": 15
                    }
                }
            }
        }
    )

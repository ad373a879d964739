"""
Note management schemas.

Request schemas accept any strings; title/content rules are enforced by
NoteService before the store is touched.
Response schemas are frozen values built from ORM rows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Page


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title (max 100 chars)")
    content: Optional[str] = Field(default=None, description="Note content (max 1000 chars)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting Notes - Q4 Planning",
                "content": "1. Review Q3 performance\n2. Set Q4 objectives",
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema.

    ``id`` comes from the URL path; the body carries the full replacement
    title and content.
    """

    id: Optional[int] = Field(default=None, description="Note identifier")
    title: Optional[str] = Field(default=None, description="Note title (max 100 chars)")
    content: Optional[str] = Field(default=None, description="Note content (max 1000 chars)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Updated Meeting Notes - Q4 Planning",
                "content": "1. Review Q3 performance\n2. Set Q4 objectives\n3. Budget",
            }
        }
    )


class NoteResponse(BaseModel):
    """Immutable note value returned by the service."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)


NotePage = Page[NoteResponse]

"""
Note Schemas

Pydantic models for learner notes.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Schema for creating a note."""

    video_id: int
    content: str = Field(..., min_length=1, max_length=256)


class NoteUpdate(BaseModel):
    """Schema for editing a note."""

    content: str = Field(..., min_length=1, max_length=256)


class NoteResponse(BaseModel):
    """Schema for note response."""

    id: int
    video_id: int
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MyCourseCreate(BaseModel):
    """Schema for adding a video to "my courses"."""

    video_id: int

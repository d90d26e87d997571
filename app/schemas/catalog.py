"""
Catalog Schemas

Pydantic models for categories and videos.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ============== Category Schemas ==============

class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = Field(None, max_length=256)
    icon: str = Field(..., min_length=1, max_length=256, description="Frontend icon name")


class CategoryResponse(CategoryCreate):
    """Schema for category response."""

    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


# ============== Video Schemas ==============

class VideoBase(BaseModel):
    """Base schema for video data."""

    title: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = Field(None, max_length=256)
    source_id: Optional[str] = Field(
        None,
        max_length=256,
        description="Google Drive file ID or local:<filename>",
    )
    thumbnail_url: Optional[str] = Field(None, max_length=256)
    duration: Optional[int] = Field(None, ge=0, description="Duration in seconds")
    category_id: Optional[int] = None


class VideoCreate(VideoBase):
    """Schema for registering a video."""


class VideoUpdate(BaseModel):
    """Schema for updating a video. Only provided fields change."""

    title: Optional[str] = Field(None, min_length=1, max_length=256)
    description: Optional[str] = Field(None, max_length=256)
    source_id: Optional[str] = Field(None, max_length=256)
    thumbnail_url: Optional[str] = Field(None, max_length=256)
    duration: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None


class VideoResponse(VideoBase):
    """Schema for video response."""

    id: int
    uploaded_by: Optional[uuid.UUID] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class VideoListResponse(BaseModel):
    """Video list plus the IDs the learner already added to "my courses"."""

    videos: List[VideoResponse]
    user_course_ids: List[int]

"""
Progress Schemas

Pydantic models for watch progress syncing.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProgressUpdate(BaseModel):
    """Schema for a progress sync from a player."""

    video_id: int = Field(..., description="Video being watched")
    watched_duration: int = Field(..., ge=0, description="Effective watched seconds")
    completed: bool = Field(default=False, description="Completion as classified by the player")


class ProgressComplete(BaseModel):
    """Schema for the explicit "mark complete" action."""

    video_id: int = Field(..., description="Video ID to mark as complete")


class ProgressResponse(BaseModel):
    """Schema for a progress record."""

    video_id: int
    watched_duration: int
    completed: bool
    last_watched_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProgressSummary(BaseModel):
    """Aggregated progress over the learner's courses."""

    completed_videos: int
    total_videos: int
    overall_percent: int
    total_duration: int
    watched_duration: int


class TrackingConfig(BaseModel):
    """Parameters players use for progress tracking."""

    completion_threshold: float
    sync_interval_seconds: float
    segment_seconds: int

"""
AviLearn Backend - Schemas Module

Pydantic models for request/response validation.
"""

from app.schemas.user import UserCreate, UserResponse, UserUpdate, AdminSetup, MessageResponse
from app.schemas.token import Token, TokenPayload
from app.schemas.catalog import (
    CategoryCreate,
    CategoryResponse,
    VideoCreate,
    VideoUpdate,
    VideoResponse,
    VideoListResponse,
)
from app.schemas.progress import (
    ProgressUpdate,
    ProgressComplete,
    ProgressResponse,
    ProgressSummary,
    TrackingConfig,
)
from app.schemas.note import NoteCreate, NoteUpdate, NoteResponse, MyCourseCreate

__all__ = [
    # User
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "AdminSetup",
    "MessageResponse",
    # Token
    "Token",
    "TokenPayload",
    # Catalog
    "CategoryCreate",
    "CategoryResponse",
    "VideoCreate",
    "VideoUpdate",
    "VideoResponse",
    "VideoListResponse",
    # Progress
    "ProgressUpdate",
    "ProgressComplete",
    "ProgressResponse",
    "ProgressSummary",
    "TrackingConfig",
    # Notes
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "MyCourseCreate",
]

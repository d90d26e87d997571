"""
AviLearn Backend - Models Module

This module exports all SQLAlchemy models for the application.
Import Base for Alembic migrations.
"""

from app.core.database import Base

# Enums
from app.models.enums import UserRole

# Models
from app.models.user import User
from app.models.category import Category
from app.models.video import Video
from app.models.watch_progress import WatchProgress
from app.models.note import Note
from app.models.my_course import MyCourse

__all__ = [
    # Base
    "Base",
    # Enums
    "UserRole",
    # Models
    "User",
    "Category",
    "Video",
    "WatchProgress",
    "Note",
    "MyCourse",
]

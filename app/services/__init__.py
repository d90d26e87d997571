"""
AviLearn Backend - Services Module

Business logic layer.
"""

from app.services import catalog_service
from app.services import note_service
from app.services import progress_service
from app.services import user_service

__all__ = [
    "catalog_service",
    "note_service",
    "progress_service",
    "user_service",
]

"""
API v1 Router

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, users, categories, videos, progress, notes, my_courses

router = APIRouter()

# Include authentication routes
router.include_router(auth.router)

# Include user management routes
router.include_router(users.router)

# Include catalog routes
router.include_router(categories.router)
router.include_router(videos.router)

# Include progress routes
router.include_router(progress.router)

# Include notes and my-courses routes
router.include_router(notes.router)
router.include_router(my_courses.router)

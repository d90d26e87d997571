"""
My Courses Routes

The learner's personal list of videos to study.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.core.database import get_db
from app.models.user import User
from app.models.video import Video
from app.schemas.catalog import VideoResponse
from app.schemas.note import MyCourseCreate
from app.schemas.user import MessageResponse
from app.services import note_service


router = APIRouter(prefix="/my-courses", tags=["My Courses"])


@router.get(
    "",
    response_model=list[VideoResponse],
    summary="Get my courses",
)
async def list_my_courses(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Video]:
    return await note_service.list_my_courses(current_user, db)


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a video to my courses",
)
async def add_my_course(
    data: MyCourseCreate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Video:
    """
    Add a video to my courses. Adding a video twice is not an error.

    Raises:
        HTTPException: 404 if the video does not exist.
    """
    return await note_service.add_my_course(current_user, data.video_id, db)


@router.delete(
    "/{video_id}",
    response_model=MessageResponse,
    summary="Remove a video from my courses",
)
async def remove_my_course(
    video_id: int,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    await note_service.remove_my_course(current_user, video_id, db)
    return MessageResponse(message="Removed from your courses")

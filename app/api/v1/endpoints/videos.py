"""
Video Routes

Catalog browsing for learners and video management for admins. The
``duration`` returned here is what players use for completion.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user, get_current_admin
from app.core.database import get_db
from app.models.user import User
from app.models.video import Video
from app.schemas.catalog import VideoCreate, VideoListResponse, VideoResponse, VideoUpdate
from app.schemas.user import MessageResponse
from app.services import catalog_service, progress_service


router = APIRouter(prefix="/videos", tags=["Catalog"])


@router.get(
    "",
    response_model=VideoListResponse,
    summary="List videos",
)
async def list_videos(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
    category_id: Optional[int] = Query(None, description="Filter by category"),
) -> VideoListResponse:
    """
    List videos newest first, with the IDs already in the user's courses.

    Args:
        category_id: Optional category filter.

    Returns:
        VideoListResponse with videos and user_course_ids.
    """
    videos = await catalog_service.list_videos(db, category_id=category_id)
    course_ids = await catalog_service.get_user_course_ids(current_user, db)

    return VideoListResponse(
        videos=[VideoResponse.model_validate(v) for v in videos],
        user_course_ids=course_ids,
    )


@router.get(
    "/{video_id}",
    response_model=VideoResponse,
    summary="Get a video",
)
async def get_video(
    video_id: int,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Video:
    """
    Get video metadata.

    Raises:
        HTTPException: 404 if video not found.
    """
    return await progress_service.get_video(video_id, db)


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a video",
)
async def create_video(
    data: VideoCreate,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Video:
    return await catalog_service.create_video(data, admin, db)


@router.put(
    "/{video_id}",
    response_model=VideoResponse,
    summary="Update a video",
)
async def update_video(
    video_id: int,
    data: VideoUpdate,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Video:
    return await catalog_service.update_video(video_id, data, db)


@router.delete(
    "/{video_id}",
    response_model=MessageResponse,
    summary="Delete a video",
)
async def delete_video(
    video_id: int,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """Delete a video together with all learners' progress and notes on it."""
    await catalog_service.delete_video(video_id, db)
    return MessageResponse(message="Video deleted")

"""
Progress Routes

Endpoints for learner watch progress. Players sync the effective watched
duration here while a video plays; the server keeps the maximum ever
reported and never un-completes a video.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.core.config import settings
from app.core.database import get_db
from app.models.user import User
from app.models.watch_progress import WatchProgress
from app.schemas.progress import (
    ProgressComplete,
    ProgressResponse,
    ProgressSummary,
    ProgressUpdate,
    TrackingConfig,
)
from app.services import progress_service
from app.tracking.segments import SEGMENT_SECONDS


router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get(
    "",
    response_model=list[ProgressResponse],
    summary="Get all progress of the current user",
)
async def list_progress(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[WatchProgress]:
    return await progress_service.get_user_progress(current_user, db)


@router.post(
    "",
    response_model=ProgressResponse,
    summary="Sync watch progress",
)
async def update_progress(
    data: ProgressUpdate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WatchProgress:
    """
    Record a progress sync from a player.

    **Rules:**
    - The user always comes from the bearer token, never from the body
    - watched_duration only increases (stored value is kept when larger)
    - completed only goes False -> True; it is also set here once the
      watched share reaches the completion threshold

    Args:
        data: video_id, watched_duration and the player's completion flag.

    Returns:
        ProgressResponse: The stored progress record.

    Raises:
        HTTPException: 404 if the video does not exist.
    """
    return await progress_service.record_progress(
        user=current_user,
        video_id=data.video_id,
        watched_duration=data.watched_duration,
        completed=data.completed,
        db=db,
    )


@router.post(
    "/complete",
    response_model=ProgressResponse,
    summary="Mark a video complete",
)
async def complete_video(
    data: ProgressComplete,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WatchProgress:
    """Explicit "mark complete" action; bypasses the threshold."""
    return await progress_service.complete_video(
        user=current_user,
        video_id=data.video_id,
        db=db,
    )


@router.get(
    "/summary",
    response_model=ProgressSummary,
    summary="Get progress summary",
)
async def get_summary(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProgressSummary:
    """Completion counts and durations over the user's courses."""
    return await progress_service.get_progress_summary(current_user, db)


@router.get(
    "/config",
    response_model=TrackingConfig,
    summary="Get tracking parameters",
)
async def get_tracking_config(response: Response) -> TrackingConfig:
    """
    Parameters players use for local tracking.

    Serving them keeps the player's completion classification in line with
    the server's.
    """
    response.headers["Cache-Control"] = "public, max-age=300"

    return TrackingConfig(
        completion_threshold=settings.COMPLETION_THRESHOLD,
        sync_interval_seconds=settings.SYNC_INTERVAL_SECONDS,
        segment_seconds=SEGMENT_SECONDS,
    )


@router.get(
    "/{video_id}",
    response_model=ProgressResponse,
    summary="Get progress of one video",
)
async def get_video_progress(
    video_id: int,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProgressResponse:
    """
    Get the saved progress of a video.

    A video that was never synced reports zero progress rather than 404,
    so players can always resume from the returned value.
    """
    progress = await progress_service.get_video_progress(current_user, video_id, db)
    if progress is None:
        return ProgressResponse(video_id=video_id, watched_duration=0, completed=False)

    return ProgressResponse.model_validate(progress)

"""
Progress Service

Business logic for watch progress: the idempotent, monotonic upsert of one
record per (user, video), the "mark complete" override and the learner's
progress summary.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import or_, select, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.user import User
from app.models.video import Video
from app.models.my_course import MyCourse
from app.models.watch_progress import WatchProgress
from app.schemas.progress import ProgressSummary
from app.tracking.completion import is_complete


logger = logging.getLogger(__name__)


async def get_video(
    video_id: int,
    db: AsyncSession,
) -> Video:
    """
    Get a video by ID.

    Raises:
        HTTPException: 404 if video not found.
    """
    result = await db.execute(
        select(Video).where(Video.id == video_id)
    )
    video = result.scalar_one_or_none()

    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Video with ID {video_id} not found",
        )

    return video


def build_upsert_statement(
    dialect_name: str,
    user_id: uuid.UUID,
    video_id: int,
    watched_duration: int,
    completed: bool,
    now: datetime,
):
    """
    Build the atomic "increase-only" upsert for a progress record.

    On conflict the stored row keeps the larger watched duration and ORs the
    completion flag, so the final state does not depend on the order in
    which concurrent or late syncs arrive.

    Args:
        dialect_name: SQLAlchemy dialect name ("postgresql" or "sqlite").
        user_id: Owning learner.
        video_id: Tracked video.
        watched_duration: Incoming watched seconds.
        completed: Incoming completion flag.
        now: Timestamp stored as last_watched_at.

    Returns:
        Insert statement with an ON CONFLICT DO UPDATE clause.
    """
    if dialect_name == "sqlite":
        insert = sqlite.insert
        greatest = func.max  # two-argument max() is scalar in SQLite
    else:
        insert = postgresql.insert
        greatest = func.greatest

    table = WatchProgress.__table__
    stmt = insert(table).values(
        user_id=user_id,
        video_id=video_id,
        watched_duration=watched_duration,
        completed=completed,
        last_watched_at=now,
    )
    return stmt.on_conflict_do_update(
        index_elements=[table.c.user_id, table.c.video_id],
        set_={
            "watched_duration": greatest(table.c.watched_duration, stmt.excluded.watched_duration),
            "completed": or_(table.c.completed, stmt.excluded.completed),
            "last_watched_at": stmt.excluded.last_watched_at,
        },
    )


async def upsert_progress(
    user_id: uuid.UUID,
    video_id: int,
    watched_duration: int,
    completed: bool,
    db: AsyncSession,
) -> WatchProgress:
    """
    Insert or update the progress record of (user_id, video_id).

    The repository trusts ``user_id``; authorization happens in the route
    dependencies.

    Returns:
        The resulting WatchProgress row.
    """
    dialect_name = db.get_bind().dialect.name
    stmt = build_upsert_statement(
        dialect_name,
        user_id=user_id,
        video_id=video_id,
        watched_duration=watched_duration,
        completed=completed,
        now=datetime.now(timezone.utc),
    )
    await db.execute(stmt)

    result = await db.execute(
        select(WatchProgress)
        .where(
            WatchProgress.user_id == user_id,
            WatchProgress.video_id == video_id,
        )
        .execution_options(populate_existing=True)
    )
    progress = result.scalar_one()

    await db.commit()

    return progress


async def get_user_progress(
    user: User,
    db: AsyncSession,
) -> list[WatchProgress]:
    """Get every progress record of a user, most recently watched first."""
    result = await db.execute(
        select(WatchProgress)
        .where(WatchProgress.user_id == user.id)
        .order_by(WatchProgress.last_watched_at.desc())
    )
    return list(result.scalars().all())


async def get_video_progress(
    user: User,
    video_id: int,
    db: AsyncSession,
) -> Optional[WatchProgress]:
    """Get the progress record of one video, or None if never synced."""
    result = await db.execute(
        select(WatchProgress).where(
            WatchProgress.user_id == user.id,
            WatchProgress.video_id == video_id,
        )
    )
    return result.scalar_one_or_none()


async def record_progress(
    user: User,
    video_id: int,
    watched_duration: int,
    completed: bool,
    db: AsyncSession,
) -> WatchProgress:
    """
    Persist a progress sync from a player.

    The completion flag is re-classified against the stored video duration,
    so a player reporting ``completed=False`` past the threshold still
    completes the video.

    Raises:
        HTTPException: 404 if the video does not exist.
    """
    video = await get_video(video_id, db)

    completed = completed or is_complete(
        watched_duration, video.duration, settings.COMPLETION_THRESHOLD
    )

    progress = await upsert_progress(
        user_id=user.id,
        video_id=video_id,
        watched_duration=watched_duration,
        completed=completed,
        db=db,
    )

    logger.debug(
        "Progress user=%s video=%s: %ss completed=%s",
        user.id, video_id, progress.watched_duration, progress.completed,
    )

    return progress


async def complete_video(
    user: User,
    video_id: int,
    db: AsyncSession,
) -> WatchProgress:
    """
    Mark a video as complete, bypassing the threshold.

    The watched duration becomes the video duration when it is known;
    otherwise the stored value is kept.
    """
    video = await get_video(video_id, db)

    progress = await upsert_progress(
        user_id=user.id,
        video_id=video_id,
        watched_duration=video.duration or 0,
        completed=True,
        db=db,
    )

    logger.info("User %s marked video %s complete", user.id, video_id)

    return progress


async def get_progress_summary(
    user: User,
    db: AsyncSession,
) -> ProgressSummary:
    """
    Aggregate progress over the videos in the learner's "my courses".

    Returns:
        ProgressSummary with completed/total counts and durations.
    """
    result = await db.execute(
        select(Video.id, Video.duration, WatchProgress.watched_duration, WatchProgress.completed)
        .join(MyCourse, MyCourse.video_id == Video.id)
        .outerjoin(
            WatchProgress,
            (WatchProgress.video_id == Video.id) & (WatchProgress.user_id == user.id),
        )
        .where(MyCourse.user_id == user.id)
    )
    rows = result.all()

    total_videos = len(rows)
    completed_videos = sum(1 for row in rows if row.completed)
    total_duration = sum(row.duration or 0 for row in rows)
    watched_duration = sum(row.watched_duration or 0 for row in rows)
    overall_percent = round(completed_videos / total_videos * 100) if total_videos else 0

    return ProgressSummary(
        completed_videos=completed_videos,
        total_videos=total_videos,
        overall_percent=overall_percent,
        total_duration=total_duration,
        watched_duration=watched_duration,
    )

"""
Catalog Service

Business logic for categories and videos.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.my_course import MyCourse
from app.models.user import User
from app.models.video import Video
from app.schemas.catalog import CategoryCreate, VideoCreate, VideoUpdate
from app.services.progress_service import get_video


logger = logging.getLogger(__name__)


# ============== Categories ==============

async def list_categories(db: AsyncSession) -> list[Category]:
    result = await db.execute(select(Category).order_by(Category.name))
    return list(result.scalars().all())


async def get_category(category_id: int, db: AsyncSession) -> Category:
    """
    Get a category by ID.

    Raises:
        HTTPException: 404 if category not found.
    """
    result = await db.execute(
        select(Category).where(Category.id == category_id)
    )
    category = result.scalar_one_or_none()

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with ID {category_id} not found",
        )

    return category


async def create_category(data: CategoryCreate, db: AsyncSession) -> Category:
    category = Category(
        name=data.name,
        description=data.description,
        icon=data.icon,
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)

    logger.info("Created category '%s'", category.name)

    return category


# ============== Videos ==============

async def list_videos(
    db: AsyncSession,
    category_id: Optional[int] = None,
) -> list[Video]:
    """
    List videos, newest first.

    Args:
        db: Database session.
        category_id: Restrict to one category when given.
    """
    query = select(Video).order_by(Video.created_at.desc(), Video.id.desc())
    if category_id is not None:
        query = query.where(Video.category_id == category_id)

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_user_course_ids(user: User, db: AsyncSession) -> list[int]:
    """IDs of the videos the user added to "my courses"."""
    result = await db.execute(
        select(MyCourse.video_id).where(MyCourse.user_id == user.id)
    )
    return list(result.scalars().all())


async def create_video(
    data: VideoCreate,
    uploader: User,
    db: AsyncSession,
) -> Video:
    """
    Register a video in the catalog.

    Raises:
        HTTPException: 404 if the category does not exist.
    """
    if data.category_id is not None:
        await get_category(data.category_id, db)

    video = Video(
        **data.model_dump(),
        uploaded_by=uploader.id,
    )
    db.add(video)
    await db.commit()
    await db.refresh(video)

    logger.info("Admin %s added video '%s'", uploader.username, video.title)

    return video


async def update_video(
    video_id: int,
    data: VideoUpdate,
    db: AsyncSession,
) -> Video:
    """Update video metadata. Only provided fields change."""
    video = await get_video(video_id, db)

    changes = data.model_dump(exclude_unset=True)
    if changes.get("category_id") is not None:
        await get_category(changes["category_id"], db)

    for field, value in changes.items():
        setattr(video, field, value)

    await db.commit()
    await db.refresh(video)

    return video


async def delete_video(video_id: int, db: AsyncSession) -> None:
    """Delete a video with its progress records, notes and course entries."""
    video = await get_video(video_id, db)

    await db.delete(video)
    await db.commit()

    logger.info("Deleted video %s ('%s')", video_id, video.title)

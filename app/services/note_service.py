"""
Note Service

Learner notes and the personal "my courses" list. Every query is scoped
to the requesting user.
"""

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.my_course import MyCourse
from app.models.note import Note
from app.models.user import User
from app.models.video import Video
from app.schemas.note import NoteCreate, NoteUpdate
from app.services.progress_service import get_video


# ============== Notes ==============

async def list_notes(user: User, db: AsyncSession) -> list[Note]:
    result = await db.execute(
        select(Note)
        .where(Note.user_id == user.id)
        .order_by(Note.created_at.desc(), Note.id.desc())
    )
    return list(result.scalars().all())


async def list_video_notes(
    user: User,
    video_id: int,
    db: AsyncSession,
) -> list[Note]:
    result = await db.execute(
        select(Note)
        .where(Note.user_id == user.id, Note.video_id == video_id)
        .order_by(Note.created_at.desc(), Note.id.desc())
    )
    return list(result.scalars().all())


async def _get_own_note(user: User, note_id: int, db: AsyncSession) -> Note:
    result = await db.execute(
        select(Note).where(Note.id == note_id)
    )
    note = result.scalar_one_or_none()

    # Someone else's note is reported as missing
    if note is None or note.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found",
        )

    return note


async def create_note(user: User, data: NoteCreate, db: AsyncSession) -> Note:
    """
    Attach a note to a video.

    Raises:
        HTTPException: 404 if the video does not exist.
    """
    await get_video(data.video_id, db)

    note = Note(user_id=user.id, video_id=data.video_id, content=data.content)
    db.add(note)
    await db.commit()
    await db.refresh(note)

    return note


async def update_note(
    user: User,
    note_id: int,
    data: NoteUpdate,
    db: AsyncSession,
) -> Note:
    note = await _get_own_note(user, note_id, db)
    note.content = data.content

    await db.commit()
    await db.refresh(note)

    return note


async def delete_note(user: User, note_id: int, db: AsyncSession) -> None:
    note = await _get_own_note(user, note_id, db)

    await db.delete(note)
    await db.commit()


# ============== My Courses ==============

async def list_my_courses(user: User, db: AsyncSession) -> list[Video]:
    """Videos in the user's course list, most recently added first."""
    result = await db.execute(
        select(Video)
        .join(MyCourse, MyCourse.video_id == Video.id)
        .where(MyCourse.user_id == user.id)
        .order_by(MyCourse.created_at.desc())
    )
    return list(result.scalars().all())


async def add_my_course(user: User, video_id: int, db: AsyncSession) -> Video:
    """
    Add a video to the user's course list. Adding twice is a no-op.

    Raises:
        HTTPException: 404 if the video does not exist.
    """
    video = await get_video(video_id, db)

    existing = await db.get(MyCourse, (user.id, video_id))
    if existing is None:
        db.add(MyCourse(user_id=user.id, video_id=video_id))
        await db.commit()

    return video


async def remove_my_course(user: User, video_id: int, db: AsyncSession) -> None:
    """
    Remove a video from the user's course list.

    Raises:
        HTTPException: 404 if the video is not in the list.
    """
    entry = await db.get(MyCourse, (user.id, video_id))
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video is not in your courses",
        )

    await db.delete(entry)
    await db.commit()

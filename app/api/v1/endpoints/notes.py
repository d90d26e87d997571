"""
Note Routes

A learner's private notes on videos.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.core.database import get_db
from app.models.note import Note
from app.models.user import User
from app.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from app.schemas.user import MessageResponse
from app.services import note_service


router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="Get all my notes",
)
async def list_notes(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Note]:
    return await note_service.list_notes(current_user, db)


@router.get(
    "/video/{video_id}",
    response_model=list[NoteResponse],
    summary="Get my notes on a video",
)
async def list_video_notes(
    video_id: int,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Note]:
    return await note_service.list_video_notes(current_user, video_id, db)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a note",
)
async def create_note(
    data: NoteCreate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Note:
    return await note_service.create_note(current_user, data, db)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Edit a note",
)
async def update_note(
    note_id: int,
    data: NoteUpdate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Note:
    """
    Edit the content of one of my notes.

    Raises:
        HTTPException: 404 if the note does not exist or is not mine.
    """
    return await note_service.update_note(current_user, note_id, data, db)


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    await note_service.delete_note(current_user, note_id, db)
    return MessageResponse(message="Note deleted")

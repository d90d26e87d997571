"""
User Routes

Administrator endpoints for account management.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_admin
from app.core.database import get_db
from app.models.user import User
from app.schemas.user import MessageResponse, UserCreate, UserResponse, UserUpdate
from app.services import user_service


router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users",
)
async def list_users(
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[User]:
    """List every account, newest first. Admin only."""
    return await user_service.list_users(db)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    user_data: UserCreate,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Create an account. Admin only.

    Raises:
        HTTPException: 400 if username or email is already registered.
    """
    return await user_service.create_user(user_data, db)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
)
async def update_user(
    user_id: uuid.UUID,
    user_update: UserUpdate,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Update an account, e.g. approve it or reset its password.

    Only provided fields will be updated.
    """
    return await user_service.update_user(user_id, user_update, db)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
)
async def delete_user(
    user_id: uuid.UUID,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """
    Delete a student account with its progress, notes and courses.

    Raises:
        HTTPException: 400 for admin accounts, 404 if not found.
    """
    await user_service.delete_user(user_id, db)
    return MessageResponse(message="User deleted")

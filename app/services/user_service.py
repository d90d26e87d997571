"""
User Service

Authentication and administrator-side account management.
"""

import logging
import uuid
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import or_, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import hash_password, verify_password
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.user import AdminSetup, UserCreate, UserUpdate


logger = logging.getLogger(__name__)


async def authenticate(
    login: str,
    password: str,
    db: AsyncSession,
) -> User:
    """
    Authenticate a user by username or email.

    Args:
        login: Username or email address.
        password: Plain text password.
        db: Database session.

    Returns:
        The authenticated user.

    Raises:
        HTTPException: 401 on bad credentials, 403 if not yet approved.
    """
    result = await db.execute(
        select(User).where(
            or_(User.username == login, User.email == login.lower())
        )
    )
    user = result.scalar_one_or_none()

    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt for '%s'", login)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_approved:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account pending approval",
        )

    return user


async def _ensure_unique(
    db: AsyncSession,
    username: Optional[str],
    email: Optional[str],
    exclude_id: Optional[uuid.UUID] = None,
) -> None:
    conditions = []
    if username:
        conditions.append(User.username == username)
    if email:
        conditions.append(User.email == email.lower())
    if not conditions:
        return

    query = select(User).where(or_(*conditions))
    if exclude_id is not None:
        query = query.where(User.id != exclude_id)

    result = await db.execute(query)
    if result.scalars().first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email already registered",
        )


async def setup_admin(
    data: AdminSetup,
    db: AsyncSession,
) -> User:
    """
    Create the first administrator account.

    Raises:
        HTTPException: 400 if an admin already exists.
    """
    result = await db.execute(
        select(func.count()).select_from(User).where(User.role == UserRole.ADMIN)
    )
    if result.scalar_one() > 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin account already exists",
        )

    admin = User(
        username=data.username,
        email=data.email.lower(),
        password_hash=hash_password(data.password),
        role=UserRole.ADMIN,
        is_approved=True,
    )
    db.add(admin)
    await db.commit()
    await db.refresh(admin)

    logger.info("Created initial admin account '%s'", admin.username)

    return admin


async def list_users(db: AsyncSession) -> list[User]:
    """Get all accounts, newest first."""
    result = await db.execute(
        select(User).order_by(User.created_at.desc())
    )
    return list(result.scalars().all())


async def get_user(user_id: uuid.UUID, db: AsyncSession) -> User:
    """
    Get a user by ID.

    Raises:
        HTTPException: 404 if user not found.
    """
    result = await db.execute(
        select(User).where(User.id == user_id)
    )
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    return user


async def create_user(data: UserCreate, db: AsyncSession) -> User:
    """
    Create an account on behalf of an administrator.

    Raises:
        HTTPException: 400 if username or email is taken.
    """
    await _ensure_unique(db, data.username, data.email)

    user = User(
        username=data.username,
        email=data.email.lower(),
        password_hash=hash_password(data.password),
        role=data.role,
        is_approved=data.is_approved,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info("Created user '%s' (%s)", user.username, user.role.value)

    return user


async def update_user(
    user_id: uuid.UUID,
    data: UserUpdate,
    db: AsyncSession,
) -> User:
    """Update an account. Only provided fields change."""
    user = await get_user(user_id, db)
    await _ensure_unique(db, data.username, data.email, exclude_id=user.id)

    if data.username is not None:
        user.username = data.username
    if data.email is not None:
        user.email = data.email.lower()
    if data.password is not None:
        user.password_hash = hash_password(data.password)
    if data.role is not None:
        user.role = data.role
    if data.is_approved is not None:
        user.is_approved = data.is_approved

    await db.commit()
    await db.refresh(user)

    return user


async def delete_user(user_id: uuid.UUID, db: AsyncSession) -> None:
    """
    Delete an account together with its progress, notes and courses.

    Raises:
        HTTPException: 404 if user not found, 400 for admin accounts.
    """
    user = await get_user(user_id, db)

    if user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin accounts cannot be deleted",
        )

    await db.delete(user)
    await db.commit()

    logger.info("Deleted user '%s'", user.username)

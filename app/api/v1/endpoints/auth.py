"""
Authentication Routes

Handles login, the current-user lookup and first-admin setup.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.core.database import get_db
from app.core.security import create_access_token
from app.models.user import User
from app.schemas.token import Token
from app.schemas.user import AdminSetup, UserResponse
from app.services import user_service


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=Token,
    summary="Login with username or email",
)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Token:
    """
    Authenticate and return a JWT access token.

    **Flow:**
    1. Look the account up by username or email
    2. Verify the password hash
    3. Reject accounts an admin has not approved yet
    4. Return a bearer token carrying the user ID and role

    Args:
        form_data: OAuth2 form (``username`` may hold an email address).
        db: Database session.

    Returns:
        Token: JWT access token.

    Raises:
        HTTPException: 401 on bad credentials, 403 when not approved.
    """
    user = await user_service.authenticate(
        form_data.username, form_data.password, db
    )

    access_token = create_access_token(
        subject=user.id,
        extra_claims={"role": user.role.value},
    )
    return Token(access_token=access_token)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
)
async def get_me(
    current_user: Annotated[User, Depends(get_current_active_user)],
) -> User:
    """Get the currently logged-in user's account."""
    return current_user


@router.post(
    "/setup-admin",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the first admin account",
)
async def setup_admin(
    data: AdminSetup,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Bootstrap the first administrator.

    Only works while no admin exists; afterwards admins create accounts
    through ``POST /users``.

    Raises:
        HTTPException: 400 if an admin already exists.
    """
    return await user_service.setup_admin(data, db)

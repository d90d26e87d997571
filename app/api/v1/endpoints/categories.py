"""
Category Routes
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user, get_current_admin
from app.core.database import get_db
from app.models.category import Category
from app.models.user import User
from app.schemas.catalog import CategoryCreate, CategoryResponse
from app.services import catalog_service


router = APIRouter(prefix="/categories", tags=["Catalog"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    current_user: Annotated[User, Depends(get_current_active_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Category]:
    return await catalog_service.list_categories(db)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    data: CategoryCreate,
    admin: Annotated[User, Depends(get_current_admin)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    return await catalog_service.create_category(data, db)

"""
User Schemas

Pydantic models for user request/response validation.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import UserRole


class UserCreate(BaseModel):
    """Schema for an admin creating a new account."""

    username: str = Field(..., min_length=3, max_length=256, description="Login name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    role: UserRole = Field(default=UserRole.STUDENT, description="User role")
    is_approved: bool = Field(default=True, description="Whether the account may sign in")


class UserUpdate(BaseModel):
    """Schema for an admin updating an account. Only provided fields change."""

    username: Optional[str] = Field(None, min_length=3, max_length=256)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    role: Optional[UserRole] = None
    is_approved: Optional[bool] = None


class UserResponse(BaseModel):
    """Schema for user response (excludes password)."""

    id: uuid.UUID
    username: str
    email: str
    role: UserRole
    is_approved: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class AdminSetup(BaseModel):
    """Schema for creating the very first admin account."""

    username: str = Field(..., min_length=3, max_length=256)
    email: EmailStr
    password: str = Field(..., min_length=8)


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
import re
import uuid
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from erp_access.models.enums import UserRole

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


class UserBase(BaseModel):
    """Base user schema."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username must contain only alphanumeric characters and underscores")
        return v


class UserCreate(UserBase):
    """Schema for creating a user. Permissions are seeded from the role."""

    password: str = Field(..., min_length=8)
    role: UserRole
    full_name: Optional[str] = Field(None, max_length=200)
    company_id: Optional[uuid.UUID] = None


class UserUpdate(BaseModel):
    """Schema for updating a user (admin use).

    Changing ``role`` replaces the permission matrix with the new role's
    defaults.
    """

    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    full_name: Optional[str] = Field(None, max_length=200)
    role: Optional[UserRole] = None
    company_id: Optional[uuid.UUID] = None
    is_active: Optional[bool] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not USERNAME_PATTERN.match(v):
            raise ValueError("Username must contain only alphanumeric characters and underscores")
        return v


class UserResponse(BaseModel):
    """Schema for user response. Never carries the password hash."""

    id: uuid.UUID
    username: str
    email: str
    full_name: Optional[str] = None
    role: UserRole
    is_active: bool
    company_id: Optional[uuid.UUID] = None
    last_login_at: Optional[datetime.datetime] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class UserDetailResponse(UserResponse):
    """User response including the stored permission matrix."""

    permissions: dict[str, dict[str, dict[str, bool]]]

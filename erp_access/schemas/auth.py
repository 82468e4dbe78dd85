# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from pydantic import BaseModel

from erp_access.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request schema."""

    username: str
    password: str


class ProfileResponse(BaseModel):
    """Caller's own identity plus everything the client needs for gating."""

    user: UserResponse
    is_super: bool
    permissions: dict[str, dict[str, dict[str, bool]]]
    accessible_modules: list[str]

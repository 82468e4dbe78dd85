# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog and matrix schemas."""
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict

from erp_access.models.enums import UserRole


class FeatureSchema(BaseModel):
    """A feature inside a catalog module."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    label: str


class ModuleSchema(BaseModel):
    """A catalog module with its features."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    feature_granular: bool
    features: list[FeatureSchema]


class PermissionMatrixUpdate(BaseModel):
    """Full replacement matrix.

    Values stay untyped; the permission store validates names and booleans
    and reports the offending key.
    """

    permissions: dict[str, Any]


class UserPermissionsResponse(BaseModel):
    """A user's role and resolved permission matrix."""

    user_id: uuid.UUID
    role: UserRole
    is_active: bool
    is_super: bool
    permissions: dict[str, dict[str, dict[str, bool]]]
    accessible_modules: list[str]

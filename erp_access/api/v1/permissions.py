# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog and per-user matrix endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from erp_access.api.deps import (
    ensure_active,
    ensure_permission,
    get_current_user,
    get_db,
    require_permission,
)
from erp_access.exceptions import AuthorizationError
from erp_access.models import User
from erp_access.models.enums import Action, UserRole
from erp_access.rbac.evaluator import accessible_modules
from erp_access.rbac.permissions import MODULE_CATALOG
from erp_access.rbac.roles import catalog_for, is_super_role
from erp_access.schemas.permission import (
    ModuleSchema,
    PermissionMatrixUpdate,
    UserPermissionsResponse,
)
from erp_access.schemas.user import UserDetailResponse
from erp_access.services import permission_store, scope_service

router = APIRouter()


def _permissions_response(db: Session, user: User) -> UserPermissionsResponse:
    matrix = permission_store.load(db, user.id)
    return UserPermissionsResponse(
        user_id=user.id,
        role=user.role,
        is_active=user.is_active,
        is_super=is_super_role(user.role),
        permissions=matrix,
        accessible_modules=accessible_modules(user.role, matrix, is_active=user.is_active),
    )


def _get_editable_user(db: Session, actor: User, user_id: uuid.UUID) -> User:
    user = scope_service.get_manageable_user(db, actor, user_id)
    if user.id == actor.id and not is_super_role(actor.role):
        raise AuthorizationError(f"{actor.id} may not edit their own permissions")
    return user


@router.get(
    "/permissions/catalog",
    response_model=list[ModuleSchema],
    summary="List permission modules",
)
def get_catalog(
    role: UserRole | None = None,
    current_user: User = Depends(get_current_user),
) -> list[ModuleSchema]:
    """The module/feature catalog, optionally narrowed to what a role is shown."""
    modules = catalog_for(role) if role is not None else MODULE_CATALOG
    return [ModuleSchema.model_validate(module) for module in modules]


@router.get(
    "/users/{user_id}/permissions",
    response_model=UserPermissionsResponse,
    summary="Get a user's permission matrix",
)
def get_user_permissions(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserPermissionsResponse:
    """Active users may read their own matrix; other users need user management access."""
    if user_id == current_user.id:
        ensure_active(current_user)
        return _permissions_response(db, current_user)

    ensure_permission(db, current_user, "settings", "users", Action.VIEW)
    user = scope_service.get_manageable_user(db, current_user, user_id)
    return _permissions_response(db, user)


@router.put(
    "/users/{user_id}/permissions",
    response_model=UserDetailResponse,
    summary="Replace a user's permission matrix",
)
def replace_user_permissions(
    user_id: uuid.UUID,
    data: PermissionMatrixUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.EDIT)),
) -> User:
    """Overwrite the whole matrix. Unknown names or non-boolean flags are rejected."""
    user = _get_editable_user(db, current_user, user_id)
    return permission_store.replace(
        db, user.id, data.permissions, actor_id=current_user.id
    )


@router.post(
    "/users/{user_id}/permissions/reset",
    response_model=UserDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Reset a user's permissions to role defaults",
)
def reset_user_permissions(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.EDIT)),
) -> User:
    user = _get_editable_user(db, current_user, user_id)
    return permission_store.reset_to_defaults(db, user.id, actor_id=current_user.id)

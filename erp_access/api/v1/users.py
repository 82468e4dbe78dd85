# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from erp_access.api.deps import get_db, require_permission
from erp_access.models import User
from erp_access.models.enums import Action
from erp_access.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from erp_access.services import scope_service, user_service

router = APIRouter()


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.VIEW)),
) -> list[User]:
    """Users in the caller's company, or every user for super roles."""
    return user_service.list_users(db, current_user)


@router.post(
    "/users",
    response_model=UserDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.ADD)),
) -> User:
    """Create a user seeded with the default permissions of their role."""
    return user_service.create_user(db, user_in, actor=current_user)


@router.get(
    "/users/{user_id}",
    response_model=UserDetailResponse,
    summary="Get a user by ID",
)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.VIEW)),
) -> User:
    user = scope_service.get_manageable_user(db, current_user, user_id)
    return user


@router.put(
    "/users/{user_id}",
    response_model=UserDetailResponse,
    summary="Update a user",
)
def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.EDIT)),
) -> User:
    """Update a user's account.

    A role change replaces the permission matrix with the new role's
    defaults. Setting is_active to false ends all of the user's sessions.
    """
    user = scope_service.get_manageable_user(db, current_user, user_id)
    return user_service.update_user(db, user, user_in, actor=current_user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("settings", "users", Action.DELETE)),
) -> Response:
    user = scope_service.get_manageable_user(db, current_user, user_id)
    user_service.delete_user(db, user, actor=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, Response
from sqlalchemy.orm import Session

from erp_access.api.deps import get_current_user, get_db
from erp_access.config import settings
from erp_access.exceptions import AuthenticationError
from erp_access.models import User
from erp_access.rbac.evaluator import accessible_modules
from erp_access.rbac.permissions import empty_matrix
from erp_access.rbac.roles import is_super_role
from erp_access.schemas.auth import LoginRequest, ProfileResponse
from erp_access.schemas.common import MessageResponse
from erp_access.schemas.user import UserResponse
from erp_access.services import auth_service, permission_store

router = APIRouter()


def build_profile(db: Session, user: User) -> ProfileResponse:
    """Build the caller's profile with their resolved matrix.

    An inactive account gets an all-false matrix.
    """
    matrix = permission_store.load(db, user.id) if user.is_active else empty_matrix()
    return ProfileResponse(
        user=UserResponse.model_validate(user),
        is_super=is_super_role(user.role),
        permissions=matrix,
        accessible_modules=accessible_modules(
            user.role, matrix, is_active=user.is_active
        ),
    )


@router.post("/login", response_model=ProfileResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Log in with username and password."""
    user = auth_service.authenticate(db, data.username, data.password)
    if not user:
        raise AuthenticationError("Invalid username or password")

    token = auth_service.create_session(db, user.id)
    response.set_cookie(
        key="session",
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )
    return build_profile(db, user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> MessageResponse:
    """Log out the current user."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key="session")
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=ProfileResponse)
def get_me(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileResponse:
    """Get the current user's role and permission matrix."""
    return build_profile(db, current_user)

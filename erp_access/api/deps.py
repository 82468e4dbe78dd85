# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection.

This is the server-side trust boundary. Protected routes declare either a
role check (``require_role``) or a (module, feature, action) check
(``require_permission``). Both resolve the caller from the session cookie,
then apply, in order: active flag, super-role bypass, and finally the
caller's own matrix, read fresh from the database on every request.
"""

import logging
from collections.abc import Callable

from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from erp_access.database import get_db
from erp_access.exceptions import AuthenticationError, AuthorizationError
from erp_access.models import User
from erp_access.models.enums import Action, UserRole
from erp_access.rbac.evaluator import can, role_allowed
from erp_access.rbac.permissions import is_known_feature
from erp_access.rbac.roles import is_super_role
from erp_access.services import auth_service, permission_store

logger = logging.getLogger(__name__)

__all__ = [
    "ensure_active",
    "ensure_permission",
    "get_current_user",
    "get_db",
    "require_permission",
    "require_role",
]


def get_current_user(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> User:
    """Get current authenticated user from session cookie.

    Inactive users are still resolved here; authorization checks deny them.
    """
    if not session:
        raise AuthenticationError("Not authenticated")

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise AuthenticationError("Invalid or expired session")

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user:
        raise AuthenticationError("User not found")

    return user


def _deny(user: User, reason: str) -> AuthorizationError:
    logger.info(f"Access denied for user {user.id}: {reason}")
    return AuthorizationError(reason)


def ensure_active(user: User) -> None:
    """Raise AuthorizationError for a deactivated account."""
    if not user.is_active:
        raise _deny(user, "account inactive")


def ensure_permission(
    db: Session, user: User, module: str, feature: str, action: Action | str
) -> None:
    """Raise AuthorizationError unless user may perform action."""
    action = Action(action).value
    ensure_active(user)
    if is_super_role(user.role):
        return
    matrix = permission_store.load(db, user.id)
    if not can(matrix, module, feature, action):
        raise _deny(user, f"{module}.{feature}.{action}")


def require_permission(
    module: str, feature: str, action: Action | str
) -> Callable[..., User]:
    """Dependency for feature-based authorization."""
    if not is_known_feature(module, feature):
        raise ValueError(f"Unknown permission target: {module}.{feature}")
    action = Action(action).value

    def dependency(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ) -> User:
        ensure_permission(db, current_user, module, feature, action)
        return current_user

    return dependency


def require_role(*roles: UserRole) -> Callable[..., User]:
    """Dependency for role-based authorization; super roles always pass."""
    allowed = frozenset(roles)

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not role_allowed(current_user.role, allowed, is_active=current_user.is_active):
            raise _deny(current_user, "role not allowed")
        return current_user

    return dependency

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User account management.

Every account gets a complete permission matrix seeded from its role on
creation, and a fresh one whenever its role changes.
"""

import logging
import uuid

from sqlalchemy.orm import Session

from erp_access.exceptions import (
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from erp_access.models import Company, User
from erp_access.models.enums import UserRole
from erp_access.rbac.roles import default_matrix, is_super_role
from erp_access.schemas.user import UserCreate, UserUpdate
from erp_access.security import get_password_hash
from erp_access.services import auth_service, scope_service

logger = logging.getLogger(__name__)


def list_users(db: Session, actor: User) -> list[User]:
    """Users visible to actor, ordered by username."""
    return scope_service.users_query(db, actor).order_by(User.username).all()


def _ensure_role_assignable(actor: User | None, role: UserRole) -> None:
    if actor is not None and is_super_role(role) and not is_super_role(actor.role):
        raise AuthorizationError(f"{actor.id} may not assign role {role.value}")


def _ensure_company_exists(db: Session, company_id: uuid.UUID | None) -> None:
    if company_id is not None and db.get(Company, company_id) is None:
        raise ValidationError(f"Unknown company: {company_id}")


def create_user(db: Session, data: UserCreate, actor: User | None = None) -> User:
    """Create an account seeded with its role's default permissions.

    ``actor`` is None only for bootstrap/seed paths.
    """
    if auth_service.get_user_by_username(db, data.username):
        raise ConflictError("Username already taken")
    if auth_service.get_user_by_email(db, data.email):
        raise ConflictError("Email already in use")

    _ensure_role_assignable(actor, data.role)
    company_id = (
        scope_service.resolve_company(actor, data.company_id)
        if actor is not None
        else data.company_id
    )
    _ensure_company_exists(db, company_id)

    user = User(
        username=data.username,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        full_name=data.full_name,
        role=data.role,
        is_active=True,
        company_id=company_id,
        permissions=default_matrix(data.role),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created user {user.id} with role {user.role.value}")
    return user


def update_user(db: Session, user: User, data: UserUpdate, actor: User) -> User:
    """Apply an admin update to user."""
    if user.id == actor.id:
        if data.role is not None and data.role != user.role:
            raise AuthorizationError(f"{actor.id} may not change their own role")
        if data.is_active is False:
            raise ValidationError("You cannot deactivate your own account")

    if data.username is not None:
        existing = (
            db.query(User)
            .filter(User.username == data.username, User.id != user.id)
            .first()
        )
        if existing:
            raise ConflictError("Username already taken")
        user.username = data.username

    if data.email is not None:
        existing = (
            db.query(User)
            .filter(User.email == data.email, User.id != user.id)
            .first()
        )
        if existing:
            raise ConflictError("Email already in use")
        user.email = data.email

    if data.password is not None:
        user.hashed_password = get_password_hash(data.password)

    if data.full_name is not None:
        user.full_name = data.full_name

    if data.company_id is not None and data.company_id != user.company_id:
        if not scope_service.is_unscoped(actor):
            raise AuthorizationError(f"{actor.id} may not move users between companies")
        _ensure_company_exists(db, data.company_id)
        user.company_id = data.company_id

    if data.role is not None and data.role != user.role:
        _ensure_role_assignable(actor, data.role)
        # Regenerate, never merge: the old role's grants must not survive.
        user.role = data.role
        user.permissions = default_matrix(data.role)
        logger.info(f"Role of user {user.id} changed to {data.role.value} by {actor.id}")

    deactivated = False
    if data.is_active is not None and data.is_active != user.is_active:
        user.is_active = data.is_active
        deactivated = not data.is_active

    db.commit()
    db.refresh(user)

    if deactivated:
        auth_service.delete_user_sessions(db, user.id)
        logger.info(f"User {user.id} deactivated by {actor.id}")

    return user


def delete_user(db: Session, user: User, actor: User) -> None:
    """Delete an account. Its permission matrix and sessions go with it."""
    if user.id == actor.id:
        raise ValidationError("You cannot delete your own account")
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info(f"User {user_id} deleted by {actor.id}")

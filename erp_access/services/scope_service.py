# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company scoping of business rows.

This is independent of the permission matrix: the matrix decides which
actions a user may take, the scope decides which rows those actions apply
to. Super roles are unscoped; everyone else works inside their own company.
"""

import uuid

from sqlalchemy import false
from sqlalchemy.orm import Query, Session

from erp_access.exceptions import AuthorizationError, NotFoundError
from erp_access.models import Dispatch, User
from erp_access.rbac.roles import is_super_role


def is_unscoped(actor: User) -> bool:
    return is_super_role(actor.role)


def can_manage_user(actor: User, target: User) -> bool:
    """Whether actor may read or change target's account."""
    if is_unscoped(actor):
        return True
    if is_super_role(target.role):
        return False
    return actor.company_id is not None and actor.company_id == target.company_id


def ensure_can_manage(actor: User, target: User) -> None:
    if not can_manage_user(actor, target):
        raise AuthorizationError(f"user {target.id} is outside the scope of {actor.id}")


def get_manageable_user(db: Session, actor: User, user_id: uuid.UUID) -> User:
    """Fetch a user actor may manage.

    Scoped actors get AuthorizationError for unknown ids as well as for
    out-of-scope ones, so the status never tells them whether an id exists.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        if is_unscoped(actor):
            raise NotFoundError("User not found")
        raise AuthorizationError(f"user {user_id} is outside the scope of {actor.id}")
    ensure_can_manage(actor, user)
    return user


def resolve_company(actor: User, requested: uuid.UUID | None) -> uuid.UUID | None:
    """Company a new record created by actor belongs to.

    Super roles pick freely; everyone else always gets their own company
    and asking for another one is refused.
    """
    if is_unscoped(actor):
        return requested
    if requested is not None and requested != actor.company_id:
        raise AuthorizationError(f"company {requested} is outside the scope of {actor.id}")
    return actor.company_id


def users_query(db: Session, actor: User) -> Query:
    query = db.query(User)
    if is_unscoped(actor):
        return query
    if actor.company_id is None:
        return query.filter(false())
    return query.filter(User.company_id == actor.company_id)


def dispatches_query(db: Session, actor: User) -> Query:
    query = db.query(Dispatch)
    if is_unscoped(actor):
        return query
    if actor.company_id is None:
        return query.filter(false())
    return query.filter(Dispatch.company_id == actor.company_id)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Startup seeding."""

import logging

from sqlalchemy.orm import Session

from erp_access.config import Settings
from erp_access.models.enums import UserRole
from erp_access.schemas.user import UserCreate
from erp_access.services import auth_service, user_service

logger = logging.getLogger(__name__)


def ensure_bootstrap_admin(db: Session, config: Settings) -> bool:
    """Create the configured Super Admin account if it does not exist yet.

    This function is idempotent. Returns True when an account was created.
    """
    if not (config.seed_admin_username and config.seed_admin_password):
        return False
    if auth_service.get_user_by_username(db, config.seed_admin_username):
        return False

    email = config.seed_admin_email or f"{config.seed_admin_username}@example.com"
    user_service.create_user(
        db,
        UserCreate(
            username=config.seed_admin_username,
            email=email,
            password=config.seed_admin_password,
            role=UserRole.SUPER_ADMIN,
            full_name="Administrator",
        ),
    )
    logger.info("Bootstrap Super Admin account created")
    return True

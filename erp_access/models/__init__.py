# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from erp_access.models.base import Base, TimestampMixin
from erp_access.models.company import Company
from erp_access.models.dispatch import Dispatch
from erp_access.models.enums import Action, UserRole
from erp_access.models.session import Session
from erp_access.models.user import User

__all__ = [
    "Action",
    "Base",
    "Company",
    "Dispatch",
    "Session",
    "TimestampMixin",
    "User",
    "UserRole",
]

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """Account role. Exactly one per user."""

    SUPER_ADMIN = "Super Admin"
    SUPER_USER = "Super User"
    UNIT_HEAD = "Unit Head"
    UNIT_MANAGER = "Unit Manager"
    SALES = "Sales"
    PRODUCTION = "Production"
    PACKING = "Packing"
    DISPATCH = "Dispatch"
    ACCOUNTS = "Accounts"


class Action(str, Enum):
    """Verbs a permission flag can grant."""

    VIEW = "view"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"

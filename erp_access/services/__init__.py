# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from erp_access.services import (
    auth_service,
    permission_store,
    scope_service,
    seed_service,
    user_service,
)

__all__ = [
    "auth_service",
    "permission_store",
    "scope_service",
    "seed_service",
    "user_service",
]

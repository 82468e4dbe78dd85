# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role-scoped permission model: catalog, role defaults and evaluation."""

from erp_access.rbac.evaluator import (
    accessible_modules,
    can,
    can_access_module,
    has_module_access,
    is_allowed,
    role_allowed,
)
from erp_access.rbac.permissions import (
    ACTIONS,
    MODULE_CATALOG,
    MODULE_FEATURE,
    FeatureDescriptor,
    ModuleDescriptor,
    PermissionMatrix,
    empty_matrix,
    get_module,
)
from erp_access.rbac.roles import (
    SUPER_ROLES,
    catalog_for,
    coerce_role,
    default_matrix,
    is_super_role,
)

__all__ = [
    "ACTIONS",
    "MODULE_CATALOG",
    "MODULE_FEATURE",
    "SUPER_ROLES",
    "FeatureDescriptor",
    "ModuleDescriptor",
    "PermissionMatrix",
    "accessible_modules",
    "can",
    "can_access_module",
    "catalog_for",
    "coerce_role",
    "default_matrix",
    "empty_matrix",
    "get_module",
    "has_module_access",
    "is_allowed",
    "is_super_role",
    "role_allowed",
]

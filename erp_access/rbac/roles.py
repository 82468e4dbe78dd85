# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role helpers and role-based default permissions."""

from erp_access.models.enums import UserRole
from erp_access.rbac.permissions import (
    ACTIONS,
    MODULE_CATALOG,
    ModuleDescriptor,
    PermissionMatrix,
    empty_matrix,
    get_module,
)

# Roles that bypass the matrix entirely. Their stored matrix is never read.
SUPER_ROLES: frozenset[UserRole] = frozenset({UserRole.SUPER_ADMIN, UserRole.SUPER_USER})

ALL_ACTIONS = ACTIONS
VIEW_ONLY = ("view",)

# (module, feature or None for every feature of the module, granted actions)
Grant = tuple[str, str | None, tuple[str, ...]]

DEFAULT_GRANTS: dict[UserRole, tuple[Grant, ...]] = {
    UserRole.SALES: (
        ("sales", None, ALL_ACTIONS),
        ("dashboard", None, VIEW_ONLY),
        ("customers", None, VIEW_ONLY),
    ),
    UserRole.UNIT_MANAGER: (
        ("unitManager", None, VIEW_ONLY),
        ("dashboard", None, VIEW_ONLY),
    ),
    UserRole.UNIT_HEAD: tuple((module.name, None, VIEW_ONLY) for module in MODULE_CATALOG)
    + (("settings", "users", ALL_ACTIONS),),
    UserRole.PRODUCTION: (
        ("production", None, ("view", "add")),
        ("dashboard", None, VIEW_ONLY),
    ),
    UserRole.PACKING: (
        ("packing", None, ("view", "edit")),
        ("dashboard", None, VIEW_ONLY),
    ),
    UserRole.DISPATCH: (
        ("dispatch", None, VIEW_ONLY),
        ("dashboard", None, VIEW_ONLY),
    ),
    UserRole.ACCOUNTS: (
        ("accounts", None, ("view", "add", "edit")),
        ("dashboard", None, VIEW_ONLY),
    ),
}


def coerce_role(role: UserRole | str | None) -> UserRole | None:
    """Map a role name to its enum member, or None when it is not a known role."""
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError:
        return None


def is_super_role(role: UserRole | str | None) -> bool:
    """True for roles that are allowed everything without a matrix lookup."""
    return coerce_role(role) in SUPER_ROLES


def catalog_for(role: UserRole | str | None) -> list[ModuleDescriptor]:
    """Modules that are presentable to a role, in catalog order."""
    if is_super_role(role):
        return list(MODULE_CATALOG)
    known = coerce_role(role)
    return [
        module
        for module in MODULE_CATALOG
        if module.roles is None or (known is not None and known in module.roles)
    ]


def default_matrix(role: UserRole | str | None) -> PermissionMatrix:
    """Seed matrix for a newly created account or a role change.

    Always complete. Anything a role policy does not grant stays False, and
    an unknown role gets an all-False matrix.
    """
    matrix = empty_matrix()
    for module_name, feature, actions in DEFAULT_GRANTS.get(coerce_role(role), ()):
        module = get_module(module_name)
        keys = (feature,) if feature else module.feature_keys
        for key in keys:
            for action in actions:
                matrix[module_name][key][action] = True
    return matrix

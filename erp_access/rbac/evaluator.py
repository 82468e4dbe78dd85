# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Allow/deny decisions against a permission matrix.

All functions here are pure and never raise on malformed input: a missing or
non-mapping path segment, or a non-boolean flag, is simply a deny. Flags are
independent, so a granted ``edit`` never implies ``view``.

Server dependencies and the client gate call the same functions so both
sides reach the same answer for the same matrix.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from erp_access.models.enums import UserRole
from erp_access.rbac.permissions import ACTIONS, MODULE_CATALOG, get_module
from erp_access.rbac.roles import coerce_role, is_super_role


def can(matrix: Any, module: str, feature: str, action: str) -> bool:
    """Look up a single flag. Absent means False."""
    if not isinstance(matrix, Mapping):
        return False
    features = matrix.get(module)
    if not isinstance(features, Mapping):
        return False
    flags = features.get(feature)
    if not isinstance(flags, Mapping):
        return False
    return flags.get(action) is True


def can_access_module(matrix: Any, module: str) -> bool:
    """True when any flag of any feature in a catalog module is granted.

    Module visibility is always derived from the feature flags; nothing
    stores it separately.
    """
    descriptor = get_module(module)
    if descriptor is None:
        return False
    return any(
        can(matrix, module, key, action)
        for key in descriptor.feature_keys
        for action in ACTIONS
    )


def is_allowed(
    role: UserRole | str | None,
    matrix: Any,
    module: str,
    feature: str,
    action: str,
    *,
    is_active: bool = True,
) -> bool:
    """Full decision for one (module, feature, action) triple.

    Order: active flag, then super-role bypass, then the matrix.
    """
    if not is_active:
        return False
    if is_super_role(role):
        return True
    return can(matrix, module, feature, action)


def has_module_access(
    role: UserRole | str | None,
    matrix: Any,
    module: str,
    *,
    is_active: bool = True,
) -> bool:
    if not is_active:
        return False
    if is_super_role(role):
        return True
    return can_access_module(matrix, module)


def role_allowed(
    role: UserRole | str | None,
    allowed_roles: Iterable[UserRole | str],
    *,
    is_active: bool = True,
) -> bool:
    """Exact role match against an allow-list; super roles always pass."""
    if not is_active:
        return False
    if is_super_role(role):
        return True
    current = coerce_role(role)
    if current is None:
        return False
    return any(coerce_role(allowed) == current for allowed in allowed_roles)


def accessible_modules(
    role: UserRole | str | None,
    matrix: Any,
    *,
    is_active: bool = True,
) -> list[str]:
    """Module names to show in navigation, in catalog order."""
    return [
        module.name
        for module in MODULE_CATALOG
        if has_module_access(role, matrix, module.name, is_active=is_active)
    ]

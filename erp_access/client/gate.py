# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""UI-side mirror of the server's permission checks.

``PermissionGate`` holds the last fetched profile as an explicit snapshot.
It is refreshed only on login or an explicit ``refresh()`` call and is
never polled, so after an administrator edits a user's permissions the gate
may be stale until the next refresh. Rendering decisions made from a stale
snapshot are a cosmetic problem: the server rejects anything not allowed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from erp_access.client.api_client import ErpAccessClient
from erp_access.rbac.evaluator import accessible_modules, has_module_access, is_allowed
from erp_access.rbac.permissions import PermissionMatrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PermissionSnapshot:
    """Role and matrix as returned by the profile endpoint."""

    user_id: str
    username: str
    role: str
    is_active: bool
    permissions: PermissionMatrix = field(default_factory=dict)

    @classmethod
    def from_profile(cls, profile: dict[str, Any]) -> "PermissionSnapshot":
        user = profile["user"]
        return cls(
            user_id=str(user["id"]),
            username=user["username"],
            role=user["role"],
            is_active=bool(user["is_active"]),
            permissions=profile.get("permissions") or {},
        )


class PermissionGate:
    """Answers "should this be rendered?" for the logged-in user."""

    def __init__(self, client: ErpAccessClient) -> None:
        self._client = client
        self._snapshot: PermissionSnapshot | None = None

    @property
    def snapshot(self) -> PermissionSnapshot | None:
        return self._snapshot

    @property
    def is_authenticated(self) -> bool:
        return self._snapshot is not None

    def login(self, username: str, password: str) -> PermissionSnapshot:
        """Log in and cache the returned profile."""
        self._snapshot = PermissionSnapshot.from_profile(
            self._client.login(username, password)
        )
        return self._snapshot

    def refresh(self) -> PermissionSnapshot:
        """Re-fetch the profile.

        On failure the previous snapshot is kept and the error propagates.
        """
        profile = self._client.fetch_profile()
        self._snapshot = PermissionSnapshot.from_profile(profile)
        logger.debug(f"Permission snapshot refreshed for user {self._snapshot.user_id}")
        return self._snapshot

    def logout(self) -> None:
        try:
            self._client.logout()
        finally:
            self._snapshot = None

    def module_access(self, module: str) -> bool:
        """Whether to show a module's navigation entry."""
        snapshot = self._snapshot
        if snapshot is None:
            return False
        return has_module_access(
            snapshot.role, snapshot.permissions, module, is_active=snapshot.is_active
        )

    def feature_access(self, module: str, feature: str, action: str = "view") -> bool:
        """Whether to show a control for one (module, feature, action)."""
        snapshot = self._snapshot
        if snapshot is None:
            return False
        return is_allowed(
            snapshot.role,
            snapshot.permissions,
            module,
            feature,
            action,
            is_active=snapshot.is_active,
        )

    def accessible_modules(self) -> list[str]:
        snapshot = self._snapshot
        if snapshot is None:
            return []
        return accessible_modules(
            snapshot.role, snapshot.permissions, is_active=snapshot.is_active
        )

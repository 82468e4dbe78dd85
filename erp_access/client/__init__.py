# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Client-side permission gating.

Advisory only: it decides what a UI should render. The server checks every
request on its own.
"""

from erp_access.client.api_client import ApiClientError, ErpAccessClient
from erp_access.client.gate import PermissionGate, PermissionSnapshot

__all__ = [
    "ApiClientError",
    "ErpAccessClient",
    "PermissionGate",
    "PermissionSnapshot",
]

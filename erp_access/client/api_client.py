# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Thin HTTP client for the authentication endpoints."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiClientError(Exception):
    """Request to the ERP Access API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ErpAccessClient:
    """Session-cookie client for login, profile refresh and logout.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (its cookie
    jar carries the session); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
        )

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._http_client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._http_client.request(method, f"{API_PREFIX}{path}", **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"{method} {path} failed with {e.response.status_code}")
            raise ApiClientError(
                f"{method} {path} failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiClientError(f"{method} {path} failed: {e}") from e
        return response.json()

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Log in and return the profile payload."""
        return self._request(
            "POST", "/auth/login", json={"username": username, "password": password}
        )

    def fetch_profile(self) -> dict[str, Any]:
        """Return the current profile (role, matrix, accessible modules)."""
        return self._request("GET", "/auth/me")

    def logout(self) -> None:
        self._request("POST", "/auth/logout")

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Error taxonomy for access-control decisions.

Services raise these exceptions; ``erp_access.main`` turns each of them into
a JSON response carrying the matching HTTP status code. None of them is
retryable: they all represent policy decisions, not transient failures.
"""

from fastapi import status


class AccessControlError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AccessControlError):
    """Submitted data references unknown names or carries bad values."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"


class AuthenticationError(AccessControlError):
    """No valid principal is attached to the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class AuthorizationError(AccessControlError):
    """Authenticated, but not allowed.

    The detail is always the same so callers cannot probe the permission
    model for which flag would have been required.
    """

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"

    def __init__(self, reason: str | None = None) -> None:
        # reason stays server-side (logs, tests) and never reaches the response
        self.reason = reason
        super().__init__(None)


class NotFoundError(AccessControlError):
    """Target record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(AccessControlError):
    """Unique field already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"

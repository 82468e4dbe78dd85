# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persistence of a user's permission matrix.

The matrix lives in the ``users.permissions`` JSON column. Writes always
replace the whole document in a single update; there is no cell-level
patching and no merge with the previous value. Concurrent replacements of
the same user's matrix resolve as last write wins.
"""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from erp_access.exceptions import NotFoundError, ValidationError
from erp_access.models import User
from erp_access.rbac.permissions import (
    ACTIONS,
    MODULE_CATALOG,
    PermissionMatrix,
    empty_matrix,
    get_module,
)
from erp_access.rbac.roles import default_matrix

logger = logging.getLogger(__name__)


def normalize(stored: Any) -> PermissionMatrix:
    """Project a stored document onto the current catalog.

    Keys added to the catalog after the document was written come back as
    False. Keys the catalog no longer knows are dropped, as are non-boolean
    values.
    """
    matrix = empty_matrix()
    if not isinstance(stored, Mapping):
        return matrix
    for module in MODULE_CATALOG:
        features = stored.get(module.name)
        if not isinstance(features, Mapping):
            continue
        for key in module.feature_keys:
            flags = features.get(key)
            if not isinstance(flags, Mapping):
                continue
            for action in ACTIONS:
                matrix[module.name][key][action] = flags.get(action) is True
    return matrix


def validate_matrix(submitted: Any) -> PermissionMatrix:
    """Check a submitted matrix and return its complete form.

    Raises:
        ValidationError: naming the first unknown module, feature or action,
            or the first flag that is not a boolean.
    """
    if not isinstance(submitted, Mapping):
        raise ValidationError("Permissions must be an object keyed by module")

    matrix = empty_matrix()
    for module_name, features in submitted.items():
        module = get_module(module_name)
        if module is None:
            raise ValidationError(f"Unknown module: {module_name}")
        if not isinstance(features, Mapping):
            raise ValidationError(f"Module {module_name} must map features to actions")
        for feature, flags in features.items():
            if feature not in module.feature_keys:
                raise ValidationError(f"Unknown feature: {module_name}.{feature}")
            if not isinstance(flags, Mapping):
                raise ValidationError(
                    f"Feature {module_name}.{feature} must map actions to booleans"
                )
            for action, value in flags.items():
                path = f"{module_name}.{feature}.{action}"
                if action not in ACTIONS:
                    raise ValidationError(f"Unknown action: {path}")
                if not isinstance(value, bool):
                    raise ValidationError(f"Permission {path} must be true or false")
                matrix[module_name][feature][action] = value
    return matrix


def _get_user(db: Session, user_id: uuid.UUID) -> User:
    # populate_existing re-reads the row even if the user is already in the
    # session identity map, so every request sees the committed matrix.
    user = db.get(User, user_id, populate_existing=True)
    if user is None:
        raise NotFoundError("User not found")
    return user


def load(db: Session, user_id: uuid.UUID) -> PermissionMatrix:
    """Fetch a user's current matrix, backfilled to the current catalog."""
    return normalize(_get_user(db, user_id).permissions)


def replace(
    db: Session,
    user_id: uuid.UUID,
    new_matrix: Any,
    actor_id: uuid.UUID | None = None,
) -> User:
    """Validate and overwrite a user's matrix.

    Validation happens before anything is written, so a rejected matrix
    leaves the stored one untouched.
    """
    matrix = validate_matrix(new_matrix)
    user = _get_user(db, user_id)
    user.permissions = matrix
    db.commit()
    db.refresh(user)
    logger.info(f"Permission matrix replaced for user {user_id} by {actor_id}")
    return user


def reset_to_defaults(
    db: Session,
    user_id: uuid.UUID,
    actor_id: uuid.UUID | None = None,
) -> User:
    """Overwrite a user's matrix with the defaults of their current role."""
    user = _get_user(db, user_id)
    user.permissions = default_matrix(user.role)
    db.commit()
    db.refresh(user)
    logger.info(f"Permission matrix reset to {user.role.value} defaults for user {user_id} by {actor_id}")
    return user

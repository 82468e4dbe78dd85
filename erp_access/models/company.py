# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company (production unit) model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from erp_access.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from erp_access.models.dispatch import Dispatch
    from erp_access.models.user import User


class Company(Base, TimestampMixin):
    """A unit that scopes which business rows a user works with."""

    __tablename__ = "companies"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    users: Mapped[list[User]] = relationship("User", back_populates="company")
    dispatches: Mapped[list[Dispatch]] = relationship(
        "Dispatch",
        back_populates="company",
        cascade="all, delete-orphan",
    )

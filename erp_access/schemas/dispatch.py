# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dispatch schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field


class DispatchCreate(BaseModel):
    """Schema for creating a dispatch.

    Super roles may pick any ``company_id``. Everyone else dispatches for
    their own company and may omit it.
    """

    order_reference: str = Field(..., min_length=1, max_length=50)
    vehicle_number: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None
    company_id: Optional[uuid.UUID] = None


class DispatchResponse(BaseModel):
    """Schema for dispatch response."""

    id: uuid.UUID
    company_id: uuid.UUID
    order_reference: str
    vehicle_number: Optional[str] = None
    notes: Optional[str] = None
    created_by_id: Optional[uuid.UUID] = None
    created_at: datetime.datetime

    model_config = {"from_attributes": True}

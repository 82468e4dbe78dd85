# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    """Schema for creating a company."""

    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=20)
    location: Optional[str] = Field(None, max_length=200)


class CompanyResponse(BaseModel):
    """Schema for company response."""

    id: uuid.UUID
    name: str
    code: str
    location: Optional[str] = None
    is_active: bool
    created_at: datetime.datetime

    model_config = {"from_attributes": True}

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dispatch API endpoints (feature-based access)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from erp_access.api.deps import get_db, require_permission
from erp_access.exceptions import ValidationError
from erp_access.models import Company, Dispatch, User
from erp_access.models.enums import Action
from erp_access.schemas.dispatch import DispatchCreate, DispatchResponse
from erp_access.services import scope_service

router = APIRouter()


@router.get("", response_model=list[DispatchResponse])
def list_dispatches(
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission("dispatch", "allDispatches", Action.VIEW)
    ),
) -> list[Dispatch]:
    return (
        scope_service.dispatches_query(db, current_user)
        .order_by(Dispatch.created_at.desc())
        .all()
    )


@router.post("", response_model=DispatchResponse, status_code=status.HTTP_201_CREATED)
def create_dispatch(
    data: DispatchCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission("dispatch", "createDispatch", Action.ADD)
    ),
) -> Dispatch:
    """Record a dispatch for the caller's company."""
    company_id = scope_service.resolve_company(current_user, data.company_id)
    if company_id is None:
        raise ValidationError("A company is required to create a dispatch")
    if db.get(Company, company_id) is None:
        raise ValidationError(f"Unknown company: {company_id}")

    dispatch = Dispatch(
        company_id=company_id,
        order_reference=data.order_reference,
        vehicle_number=data.vehicle_number,
        notes=data.notes,
        created_by_id=current_user.id,
    )
    db.add(dispatch)
    db.commit()
    db.refresh(dispatch)
    return dispatch

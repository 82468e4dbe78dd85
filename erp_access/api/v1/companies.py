# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company API endpoints (role-based access)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from erp_access.api.deps import get_db, require_role
from erp_access.exceptions import ConflictError
from erp_access.models import Company, User
from erp_access.models.enums import UserRole
from erp_access.schemas.company import CompanyCreate, CompanyResponse
from erp_access.services import scope_service

router = APIRouter()


@router.get("", response_model=list[CompanyResponse])
def list_companies(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.UNIT_HEAD, UserRole.UNIT_MANAGER)),
) -> list[Company]:
    """Super roles see every company, unit roles only their own."""
    query = db.query(Company)
    if not scope_service.is_unscoped(current_user):
        query = query.filter(Company.id == current_user.company_id)
    return query.order_by(Company.name).all()


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    data: CompanyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.SUPER_ADMIN)),
) -> Company:
    if db.query(Company).filter(Company.code == data.code).first():
        raise ConflictError("Company code already in use")

    company = Company(name=data.name, code=data.code, location=data.location)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company

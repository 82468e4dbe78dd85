# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from erp_access.api.v1 import auth, companies, dispatches, permissions, users

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# User management routes
api_router.include_router(users.router, tags=["users"])

# Permission catalog and matrix routes
api_router.include_router(permissions.router, tags=["permissions"])

# Company routes
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])

# Dispatch routes
api_router.include_router(dispatches.router, prefix="/dispatches", tags=["dispatches"])

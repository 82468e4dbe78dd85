# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from erp_access import __version__
from erp_access.config import settings
from erp_access.database import SessionLocal, engine
from erp_access.exceptions import AccessControlError
from erp_access.models import Base
from erp_access.schemas.common import HealthResponse
from erp_access.services import auth_service, seed_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_service.ensure_bootstrap_admin(db, settings)
        expired = auth_service.cleanup_expired_sessions(db)
        if expired:
            logger.info(f"Removed {expired} expired sessions")
    finally:
        db.close()

    logger.info(f"{settings.app_name} {__version__} started")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    description="Role-scoped permission service for the manufacturing ERP",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AccessControlError)
async def access_control_error_handler(
    _request: Request, exc: AccessControlError
) -> JSONResponse:
    """Render service errors as {"detail": ...} with their status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


from erp_access.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")

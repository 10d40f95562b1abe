# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dispatchdesk.config import get_settings
from dispatchdesk.database import SessionLocal
from dispatchdesk.exceptions import DispatchDeskError
from dispatchdesk.schemas.common import ErrorResponse, HealthResponse
from dispatchdesk.services import rbac_seed_service

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    if settings.seed_on_startup:
        logger.info("Seeding built-in roles...")
        db = SessionLocal()
        try:
            rbac_seed_service.seed_rbac_data(db)
            rbac_seed_service.ensure_sysadmin_account(
                db, settings.sysadmin_username, settings.sysadmin_password
            )
        finally:
            db.close()

    yield

    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    description="Work order dispatching with role-based access control",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration = round((time.time() - start_time) * 1000, 2)
    logger.info(
        "%s %s %s %sms",
        request.method,
        request.url.path,
        response.status_code,
        duration,
    )
    return response


@app.exception_handler(DispatchDeskError)
async def dispatchdesk_exception_handler(request: Request, exc: DispatchDeskError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.message, code=exc.code).model_dump(),
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from dispatchdesk.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")

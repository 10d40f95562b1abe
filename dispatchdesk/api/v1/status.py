# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""System status API endpoint."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_db, require_capability
from dispatchdesk.models import Role, Ticket, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.rbac.roles import SUPERUSER_ROLE
from dispatchdesk.schemas.common import SystemStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SystemStatusResponse)
def get_system_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.VIEW_SYSTEM_STATUS)),
) -> SystemStatusResponse:
    """Get database health and basic counts."""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = "unavailable"

    return SystemStatusResponse(
        status="ok" if database == "ok" else "degraded",
        database=database,
        users=db.query(User).count(),
        pending_users=db.query(User)
        .filter(User.approved.is_(False), User.role != SUPERUSER_ROLE)
        .count(),
        roles=db.query(Role).count(),
        custom_roles=db.query(Role).filter(Role.is_built_in.is_(False)).count(),
        tickets=db.query(Ticket).count(),
    )

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity log API endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_db, require_capability
from dispatchdesk.models import User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.activity_log import ActivityLogPage
from dispatchdesk.services import activity_log_service

router = APIRouter()


@router.get("", response_model=ActivityLogPage)
def list_logs(
    category: str | None = None,
    action: str | None = None,
    user_id: str | None = None,
    since: datetime | None = None,
    until: datetime | None = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=activity_log_service.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.VIEW_LOGS)),
) -> dict:
    """List activity log entries, newest first."""
    return activity_log_service.query_logs(
        db,
        category=category,
        action=action,
        user_id=user_id,
        since=since,
        until=until,
        page=page,
        page_size=page_size,
    )


@router.get("/categories", response_model=list[str])
def list_categories(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.VIEW_LOGS)),
) -> list[str]:
    """List the categories present in the log."""
    return activity_log_service.get_categories(db)

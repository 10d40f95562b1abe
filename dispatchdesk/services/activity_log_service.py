# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity log recording and querying."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from dispatchdesk.models import ActivityAction, ActivityCategory, ActivityLog, User

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 200


def log_activity(
    db: Session,
    user: User,
    action: ActivityAction,
    category: ActivityCategory,
    description: str,
    target_id: Any = None,
    target_type: str | None = None,
    changes: dict[str, Any] | None = None,
) -> ActivityLog:
    """Stage an activity log entry in the caller's transaction.

    The entry is committed (or rolled back) together with the change it
    describes.
    """
    entry = ActivityLog(
        user_id=str(user.id),
        user_name=user.display_name,
        user_email=user.email,
        action=action.value,
        category=category.value,
        description=description,
        target_id=str(target_id) if target_id is not None else None,
        target_type=target_type,
        changes=changes,
    )
    db.add(entry)
    logger.info(f"{category.value}/{action.value} by {user.username}: {description}")
    return entry


def query_logs(
    db: Session,
    category: str | None = None,
    action: str | None = None,
    user_id: str | None = None,
    since: datetime | None = None,
    until: datetime | None = None,
    page: int = 1,
    page_size: int = 50,
) -> dict:
    """Get a page of log entries, newest first."""
    page = max(page, 1)
    page_size = min(max(page_size, 1), MAX_PAGE_SIZE)

    query = db.query(ActivityLog)
    if category:
        query = query.filter(ActivityLog.category == category)
    if action:
        query = query.filter(ActivityLog.action == action)
    if user_id:
        query = query.filter(ActivityLog.user_id == user_id)
    if since:
        query = query.filter(ActivityLog.timestamp >= since)
    if until:
        query = query.filter(ActivityLog.timestamp <= until)

    total = query.count()
    logs = (
        query.order_by(ActivityLog.timestamp.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return {"logs": logs, "total": total, "page": page, "page_size": page_size}


def get_categories(db: Session) -> list[str]:
    """Get the distinct categories present in the log."""
    rows = db.query(ActivityLog.category).distinct().order_by(ActivityLog.category).all()
    return [row[0] for row in rows]

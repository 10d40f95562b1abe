# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity log schemas."""

import datetime
import uuid
from typing import Any

from pydantic import BaseModel


class ActivityLogResponse(BaseModel):
    """Schema for one activity log entry."""

    id: uuid.UUID
    timestamp: datetime.datetime
    user_id: str
    user_name: str
    user_email: str
    action: str
    category: str
    description: str
    target_id: str | None = None
    target_type: str | None = None
    changes: dict[str, Any] | None = None

    model_config = {"from_attributes": True}


class ActivityLogPage(BaseModel):
    """Schema for a page of activity log entries."""

    logs: list[ActivityLogResponse]
    total: int
    page: int
    page_size: int

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Bug report schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field, field_validator


class BugReportCreate(BaseModel):
    """Schema for submitting a bug report."""

    message: str = Field(..., max_length=5000)

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Bug report message is required")
        return v


class BugReportResponse(BaseModel):
    """Schema for bug report response."""

    id: uuid.UUID
    message: str
    submitted_by_id: uuid.UUID | None = None
    submitted_by_name: str
    created_at: datetime.datetime

    model_config = {"from_attributes": True}


class BugReportCount(BaseModel):
    count: int

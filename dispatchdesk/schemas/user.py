# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Schema for user response."""

    id: uuid.UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    role: str
    approved: bool
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class PendingUserResponse(BaseModel):
    """Registration awaiting approval."""

    id: uuid.UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime.datetime

    model_config = {"from_attributes": True}


class UserRoleUpdate(BaseModel):
    """Schema for changing a user's role."""

    role: str = Field(..., min_length=1, max_length=100)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ErrorResponse(BaseModel):
    """Error body returned for domain errors."""

    detail: str
    code: str


class SystemStatusResponse(BaseModel):
    """System status overview."""

    status: str
    database: str
    users: int
    pending_users: int
    roles: int
    custom_roles: int
    tickets: int

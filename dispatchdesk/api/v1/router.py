# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from dispatchdesk.api.v1 import (
    auth,
    bug_reports,
    departments,
    logs,
    rbac,
    status,
    technicians,
    tickets,
    users,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Department and technician routes
api_router.include_router(
    departments.router, prefix="/departments", tags=["departments"]
)
api_router.include_router(
    technicians.router, prefix="/technicians", tags=["technicians"]
)

# Ticket routes
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])

# Bug report routes
api_router.include_router(
    bug_reports.router, prefix="/bug-reports", tags=["bug-reports"]
)

# Activity log routes
api_router.include_router(logs.router, prefix="/logs", tags=["logs"])

# System status routes
api_router.include_router(status.router, prefix="/status", tags=["status"])

# RBAC routes
api_router.include_router(rbac.router, tags=["rbac"])

# User management routes
api_router.include_router(users.router, tags=["users"])

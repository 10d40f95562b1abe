# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from dispatchdesk.models.activity_log import ActivityLog
from dispatchdesk.models.base import Base, TimestampMixin
from dispatchdesk.models.bug_report import BugReport
from dispatchdesk.models.department import Department, Technician
from dispatchdesk.models.enums import ActivityAction, ActivityCategory
from dispatchdesk.models.permission_set import PermissionSet
from dispatchdesk.models.role import Role
from dispatchdesk.models.session import Session
from dispatchdesk.models.ticket import Ticket, ticket_assignees
from dispatchdesk.models.user import User

__all__ = [
    "ActivityAction",
    "ActivityCategory",
    "ActivityLog",
    "Base",
    "BugReport",
    "Department",
    "PermissionSet",
    "Role",
    "Session",
    "Technician",
    "Ticket",
    "TimestampMixin",
    "User",
    "ticket_assignees",
]

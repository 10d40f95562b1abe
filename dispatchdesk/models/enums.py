# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class ActivityCategory(str, Enum):
    """Category of an activity log entry."""

    AUTH = "AUTH"
    USER = "USER"
    PERMISSIONS = "PERMISSIONS"
    TICKET = "TICKET"
    DEPARTMENT = "DEPARTMENT"
    TECHNICIAN = "TECHNICIAN"
    BUG_REPORT = "BUG_REPORT"
    SYSTEM = "SYSTEM"


class ActivityAction(str, Enum):
    """Actions recorded in the activity log."""

    USER_LOGIN = "USER_LOGIN"
    USER_LOGOUT = "USER_LOGOUT"
    USER_REGISTERED = "USER_REGISTERED"
    USER_APPROVED = "USER_APPROVED"
    USER_REJECTED = "USER_REJECTED"
    USER_ROLE_CHANGED = "USER_ROLE_CHANGED"
    USER_DELETED = "USER_DELETED"

    ROLE_CREATED = "ROLE_CREATED"
    ROLE_RENAMED = "ROLE_RENAMED"
    ROLE_DELETED = "ROLE_DELETED"
    ROLE_PERMISSIONS_UPDATED = "ROLE_PERMISSIONS_UPDATED"
    ROLE_PERMISSIONS_RESET = "ROLE_PERMISSIONS_RESET"

    TICKET_CREATED = "TICKET_CREATED"
    TICKET_UPDATED = "TICKET_UPDATED"
    TICKET_DELETED = "TICKET_DELETED"

    DEPARTMENT_CREATED = "DEPARTMENT_CREATED"
    DEPARTMENT_UPDATED = "DEPARTMENT_UPDATED"
    DEPARTMENT_DELETED = "DEPARTMENT_DELETED"

    TECHNICIAN_CREATED = "TECHNICIAN_CREATED"
    TECHNICIAN_UPDATED = "TECHNICIAN_UPDATED"
    TECHNICIAN_DELETED = "TECHNICIAN_DELETED"

    BUG_REPORT_SUBMITTED = "BUG_REPORT_SUBMITTED"
    BUG_REPORT_DELETED = "BUG_REPORT_DELETED"

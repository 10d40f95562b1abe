# dispatchdesk/rbac/capabilities.py
from enum import Enum


class Capability(str, Enum):
    """Known capability keys shared with every client of the API."""

    # Page visibility
    VIEW_DASHBOARD = "viewDashboard"
    VIEW_CALENDAR = "viewCalendar"
    VIEW_TICKETS = "viewTickets"
    VIEW_ADMINISTRATOR = "viewAdministrator"
    VIEW_ABSENCES = "viewAbsences"
    VIEW_SKILLS = "viewSkills"

    # Tickets
    CREATE_TICKETS = "createTickets"
    EDIT_OWN_TICKETS = "editOwnTickets"
    EDIT_ALL_TICKETS = "editAllTickets"
    DELETE_TICKETS = "deleteTickets"
    ASSIGN_TICKETS = "assignTickets"

    # User management
    VIEW_USERS = "viewUsers"
    MANAGE_USERS = "manageUsers"
    APPROVE_USERS = "approveUsers"

    # Bug reports
    SUBMIT_BUG_REPORT = "submitBugReport"
    VIEW_BUG_REPORTS = "viewBugReports"

    # Administration
    MANAGE_DEPARTMENTS = "manageDepartments"
    MANAGE_TECHNICIANS = "manageTechnicians"
    VIEW_SYSTEM_STATUS = "viewSystemStatus"
    MANAGE_PERMISSIONS = "managePermissions"
    VIEW_LOGS = "viewLogs"


CAPABILITY_KEYS: tuple[str, ...] = tuple(c.value for c in Capability)

CAPABILITY_DESCRIPTIONS: dict[Capability, str] = {
    Capability.VIEW_DASHBOARD: "View the dashboard",
    Capability.VIEW_CALENDAR: "View the ticket calendar",
    Capability.VIEW_TICKETS: "View the ticket list",
    Capability.VIEW_ADMINISTRATOR: "Open the administrator page",
    Capability.VIEW_ABSENCES: "View technician absences",
    Capability.VIEW_SKILLS: "View the skills matrix",
    Capability.CREATE_TICKETS: "Create tickets",
    Capability.EDIT_OWN_TICKETS: "Edit tickets assigned to yourself",
    Capability.EDIT_ALL_TICKETS: "Edit any ticket",
    Capability.DELETE_TICKETS: "Delete tickets",
    Capability.ASSIGN_TICKETS: "Assign technicians to tickets",
    Capability.VIEW_USERS: "View user accounts",
    Capability.MANAGE_USERS: "Change roles of and delete user accounts",
    Capability.APPROVE_USERS: "Approve or reject pending registrations",
    Capability.SUBMIT_BUG_REPORT: "Submit bug reports",
    Capability.VIEW_BUG_REPORTS: "View submitted bug reports",
    Capability.MANAGE_DEPARTMENTS: "Create, edit and delete departments",
    Capability.MANAGE_TECHNICIANS: "Create, edit and delete technicians",
    Capability.VIEW_SYSTEM_STATUS: "View system status",
    Capability.MANAGE_PERMISSIONS: "Manage roles and their permissions",
    Capability.VIEW_LOGS: "View the activity log",
}


def is_known_capability(key: str) -> bool:
    """Check whether a string is part of the capability vocabulary."""
    return key in CAPABILITY_KEYS


def empty_capability_set() -> dict[str, bool]:
    """Return a mapping with every known capability set to False."""
    return {key: False for key in CAPABILITY_KEYS}


def full_capability_set() -> dict[str, bool]:
    """Return a mapping with every known capability set to True."""
    return {key: True for key in CAPABILITY_KEYS}


def normalize_capabilities(raw: dict[str, bool] | None) -> dict[str, bool]:
    """Project stored capabilities onto the vocabulary.

    Missing keys read as False and keys outside the vocabulary are dropped.
    """
    result = empty_capability_set()
    if raw:
        for key in CAPABILITY_KEYS:
            result[key] = raw.get(key) is True
    return result

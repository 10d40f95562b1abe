"""Services package."""
from dispatchdesk.services import (
    activity_log_service,
    auth_service,
    bug_report_service,
    department_service,
    permission_service,
    rbac_seed_service,
    rbac_service,
    role_store,
    ticket_service,
    user_service,
)

__all__ = [
    "activity_log_service",
    "auth_service",
    "bug_report_service",
    "department_service",
    "permission_service",
    "rbac_seed_service",
    "rbac_service",
    "role_store",
    "ticket_service",
    "user_service",
]

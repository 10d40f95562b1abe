"""Pydantic schemas package."""
from dispatchdesk.schemas.activity_log import ActivityLogPage, ActivityLogResponse
from dispatchdesk.schemas.bug_report import (
    BugReportCount,
    BugReportCreate,
    BugReportResponse,
)
from dispatchdesk.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from dispatchdesk.schemas.common import (
    ErrorResponse,
    HealthResponse,
    SystemStatusResponse,
)
from dispatchdesk.schemas.department import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
    TechnicianCreate,
    TechnicianResponse,
    TechnicianUpdate,
)
from dispatchdesk.schemas.rbac import (
    CapabilitySchema,
    RoleCreateSchema,
    RoleDeleteResult,
    RolePermissionsSchema,
    RolePermissionsUpdateSchema,
    RoleRenameResult,
    RoleRenameSchema,
    RoleSchema,
)
from dispatchdesk.schemas.ticket import TicketCreate, TicketResponse, TicketUpdate
from dispatchdesk.schemas.user import PendingUserResponse, UserResponse, UserRoleUpdate

__all__ = [
    "ActivityLogPage",
    "ActivityLogResponse",
    "AuthResponse",
    "BugReportCount",
    "BugReportCreate",
    "BugReportResponse",
    "CapabilitySchema",
    "DepartmentCreate",
    "DepartmentResponse",
    "DepartmentUpdate",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "PendingUserResponse",
    "RegisterRequest",
    "RegisterResponse",
    "RoleCreateSchema",
    "RoleDeleteResult",
    "RolePermissionsSchema",
    "RolePermissionsUpdateSchema",
    "RoleRenameResult",
    "RoleRenameSchema",
    "RoleSchema",
    "SystemStatusResponse",
    "TechnicianCreate",
    "TechnicianResponse",
    "TechnicianUpdate",
    "TicketCreate",
    "TicketResponse",
    "TicketUpdate",
    "UserResponse",
    "UserRoleUpdate",
]

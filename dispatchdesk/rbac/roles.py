# dispatchdesk/rbac/roles.py
import re

from .capabilities import CAPABILITY_KEYS, Capability

ROLE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
ROLE_NAME_MAX_LENGTH = 100

USER_ROLE = "user"
TECHNICIAN_ROLE = "technician"
ADMINISTRATOR_ROLE = "administrator"
# The superuser role always resolves to every capability and is never stored
SUPERUSER_ROLE = "sysadmin"

BUILT_IN_ROLES = (USER_ROLE, TECHNICIAN_ROLE, ADMINISTRATOR_ROLE, SUPERUSER_ROLE)

_USER_DEFAULTS = [
    Capability.VIEW_DASHBOARD,
    Capability.VIEW_CALENDAR,
    Capability.SUBMIT_BUG_REPORT,
]

_TECHNICIAN_DEFAULTS = _USER_DEFAULTS + [
    Capability.VIEW_TICKETS,
    Capability.CREATE_TICKETS,
    Capability.EDIT_OWN_TICKETS,
]


def _schema(granted: list[Capability]) -> dict[str, bool]:
    values = {c.value for c in granted}
    return {key: key in values for key in CAPABILITY_KEYS}


# Default capability schemas for the editable built-in roles; reset restores these
DEFAULT_ROLE_CAPABILITIES: dict[str, dict[str, bool]] = {
    USER_ROLE: _schema(_USER_DEFAULTS),
    TECHNICIAN_ROLE: _schema(_TECHNICIAN_DEFAULTS),
    ADMINISTRATOR_ROLE: _schema(list(Capability)),
}

DEFAULT_ROLES = [
    {
        "name": SUPERUSER_ROLE,
        "is_superuser": True,
        "description": "System administrator with every capability. Cannot be modified.",
    },
    {
        "name": ADMINISTRATOR_ROLE,
        "is_superuser": False,
        "description": "Manages users, departments, technicians and permissions.",
    },
    {
        "name": TECHNICIAN_ROLE,
        "is_superuser": False,
        "description": "Works on assigned tickets.",
    },
    {
        "name": USER_ROLE,
        "is_superuser": False,
        "description": "Basic read-only access to dashboard and calendar.",
    },
]


def is_superuser_role(name: str) -> bool:
    return name == SUPERUSER_ROLE


def is_built_in_role(name: str) -> bool:
    return name in BUILT_IN_ROLES


def is_valid_role_name(name: str) -> bool:
    """Check a role name against the naming rules."""
    return (
        bool(name)
        and len(name) <= ROLE_NAME_MAX_LENGTH
        and ROLE_NAME_PATTERN.fullmatch(name) is not None
    )

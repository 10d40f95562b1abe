# dispatchdesk/services/permission_service.py
"""Capability resolution and the authorization gate."""

import logging

from sqlalchemy.orm import Session

from dispatchdesk.exceptions import PermissionDeniedError, RoleNotFoundError
from dispatchdesk.models import User
from dispatchdesk.rbac.capabilities import (
    Capability,
    empty_capability_set,
    full_capability_set,
    is_known_capability,
)
from dispatchdesk.rbac.roles import is_superuser_role
from dispatchdesk.services import role_store

logger = logging.getLogger(__name__)


def resolve_capabilities(db: Session, role_name: str) -> dict[str, bool]:
    """Get the full capability set of a role.

    The superuser role resolves to every capability without touching storage.
    Raises RoleNotFoundError when the role has no permission set.
    """
    if is_superuser_role(role_name):
        return full_capability_set()

    capabilities = role_store.load_capabilities(db, role_name)
    if capabilities is None:
        raise RoleNotFoundError(role_name)
    return capabilities


def resolve_capabilities_for_user(db: Session, user: User) -> dict[str, bool]:
    """Get the capability set of the user's current role."""
    return resolve_capabilities(db, user.role)


def effective_capabilities(db: Session, user: User) -> dict[str, bool]:
    """Get the capabilities a user may actually exercise.

    Inactive users and users whose role no longer exists get nothing.
    """
    if not user.is_active:
        return empty_capability_set()
    try:
        return resolve_capabilities_for_user(db, user)
    except RoleNotFoundError:
        logger.error(
            f"User {user.id} ({user.username}) references missing role "
            f"'{user.role}'; denying all capabilities"
        )
        return empty_capability_set()


def authorize(db: Session, user: User | None, capability: Capability | str) -> bool:
    """Check if a user holds a capability. Unknown keys are never granted."""
    if user is None:
        return False
    key = capability.value if isinstance(capability, Capability) else capability
    if not is_known_capability(key):
        return False
    return effective_capabilities(db, user)[key]


def require_capability(db: Session, user: User | None, capability: Capability | str) -> None:
    """Raise PermissionDeniedError unless the user holds the capability."""
    if not authorize(db, user, capability):
        key = capability.value if isinstance(capability, Capability) else capability
        raise PermissionDeniedError(key)

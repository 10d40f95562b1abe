# dispatchdesk/services/rbac_service.py
"""Role administration: the only write path for roles and permission sets.

Every operation requires the acting user to hold ``managePermissions`` and
runs as a single transaction that is rolled back on any error.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from dispatchdesk.exceptions import (
    BuiltInRoleImmutableError,
    ConcurrentModificationError,
    DuplicateRoleError,
    ForbiddenError,
    InvalidCapabilityError,
    InvalidRoleNameError,
    RoleInUseError,
    RoleNotFoundError,
    SameNameError,
    SuperuserRoleImmutableError,
)
from dispatchdesk.models import ActivityAction, ActivityCategory, Role, User
from dispatchdesk.rbac.capabilities import Capability, is_known_capability
from dispatchdesk.rbac.roles import (
    DEFAULT_ROLE_CAPABILITIES,
    is_superuser_role,
    is_valid_role_name,
)
from dispatchdesk.services import activity_log_service, permission_service, role_store

logger = logging.getLogger(__name__)


@dataclass
class RoleSummary:
    """Role as listed in the administration UI."""

    name: str
    is_built_in: bool
    is_custom: bool
    is_superuser: bool
    template_role: str | None
    description: str | None
    user_count: int


@contextmanager
def _transaction(db: Session, role_name: str, new_name: str | None = None) -> Iterator[None]:
    """Commit the block as one unit, translating lost races into domain errors."""
    try:
        yield
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        logger.warning(f"Concurrent modification of role '{role_name}' detected")
        raise ConcurrentModificationError(role_name) from exc
    except IntegrityError as exc:
        db.rollback()
        if new_name is not None:
            raise DuplicateRoleError(new_name) from exc
        raise
    except Exception:
        db.rollback()
        raise


def _require_admin(db: Session, actor: User) -> None:
    permission_service.require_capability(db, actor, Capability.MANAGE_PERMISSIONS)


def _validate_new_name(name: str) -> None:
    if not is_valid_role_name(name):
        raise InvalidRoleNameError(name)


def _validate_patch(patch: dict[str, bool]) -> None:
    invalid = [
        key
        for key, value in patch.items()
        if not is_known_capability(key) or not isinstance(value, bool)
    ]
    if invalid:
        raise InvalidCapabilityError(invalid)


def list_roles(db: Session, actor: User) -> list[RoleSummary]:
    """Get every role with holder counts, ordered by name."""
    _require_admin(db, actor)
    counts = role_store.holder_counts(db)
    return [
        RoleSummary(
            name=role.name,
            is_built_in=role.is_built_in,
            is_custom=role.is_custom,
            is_superuser=role.is_superuser,
            template_role=role.template_role,
            description=role.description,
            user_count=counts.get(role.name, 0),
        )
        for role in role_store.list_roles(db)
    ]


def get_role_permissions(db: Session, actor: User, role_name: str) -> dict[str, bool]:
    """Get the resolved capability set of a role for editing."""
    _require_admin(db, actor)
    return permission_service.resolve_capabilities(db, role_name)


def update_role_permissions(
    db: Session, actor: User, role_name: str, patch: dict[str, bool]
) -> dict[str, bool]:
    """Merge a capability patch into a role's permission set.

    Keys absent from the patch keep their value. Either every key applies or,
    on any error, none does.
    """
    _require_admin(db, actor)
    if is_superuser_role(role_name):
        raise SuperuserRoleImmutableError(role_name)
    _validate_patch(patch)

    with _transaction(db, role_name):
        role = role_store.require_role(db, role_name, for_update=True)
        before = permission_service.resolve_capabilities(db, role_name)
        merged = {**before, **patch}
        role_store.write_capabilities(db, role, merged)
        changed = {key: value for key, value in patch.items() if before[key] != value}
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.ROLE_PERMISSIONS_UPDATED,
            ActivityCategory.PERMISSIONS,
            f"Updated permissions of role '{role_name}'",
            target_id=role.id,
            target_type="role",
            changes=changed,
        )
    return permission_service.resolve_capabilities(db, role_name)


def _template_capabilities(db: Session, role: Role) -> dict[str, bool]:
    if role.is_built_in:
        return dict(DEFAULT_ROLE_CAPABILITIES[role.name])
    if role.template_role is None:
        raise RoleNotFoundError(f"template of {role.name}")
    return permission_service.resolve_capabilities(db, role.template_role)


def reset_role_permissions(db: Session, actor: User, role_name: str) -> dict[str, bool]:
    """Restore a role's capabilities to its template.

    Built-in roles return to their default schema; custom roles take the
    current capabilities of the built-in role they were created from.
    """
    _require_admin(db, actor)
    if is_superuser_role(role_name):
        raise SuperuserRoleImmutableError(role_name)

    with _transaction(db, role_name):
        role = role_store.require_role(db, role_name, for_update=True)
        defaults = _template_capabilities(db, role)
        role_store.write_capabilities(db, role, defaults)
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.ROLE_PERMISSIONS_RESET,
            ActivityCategory.PERMISSIONS,
            f"Reset permissions of role '{role_name}' to defaults",
            target_id=role.id,
            target_type="role",
        )
    return permission_service.resolve_capabilities(db, role_name)


def create_role(
    db: Session,
    actor: User,
    new_name: str,
    based_on: str,
    description: str | None = None,
) -> Role:
    """Create a custom role with a snapshot of another role's capabilities."""
    _require_admin(db, actor)
    _validate_new_name(new_name)
    if role_store.role_exists(db, new_name):
        raise DuplicateRoleError(new_name)

    with _transaction(db, new_name, new_name=new_name):
        source = role_store.require_role(db, based_on)
        # Snapshot, so later edits of the source do not propagate
        capabilities = permission_service.resolve_capabilities(db, based_on)
        template = source.name if source.is_built_in else source.template_role
        role = role_store.add_role(
            db,
            new_name,
            capabilities,
            template_role=template or source.name,
            description=description,
        )
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.ROLE_CREATED,
            ActivityCategory.PERMISSIONS,
            f"Created role '{new_name}' based on '{based_on}'",
            target_id=role.id,
            target_type="role",
            changes={"based_on": based_on},
        )
    db.refresh(role)
    logger.info(f"Role '{new_name}' created from '{based_on}' by {actor.username}")
    return role


def rename_role(db: Session, actor: User, old_name: str, new_name: str) -> int:
    """Rename a custom role and move all of its holders to the new name.

    Returns the number of users whose role was rewritten.
    """
    _require_admin(db, actor)
    if is_superuser_role(old_name):
        raise SuperuserRoleImmutableError(old_name)
    _validate_new_name(new_name)
    if new_name == old_name:
        raise SameNameError(old_name)

    with _transaction(db, old_name, new_name=new_name):
        role = role_store.require_role(db, old_name, for_update=True)
        if role.is_built_in:
            raise BuiltInRoleImmutableError(old_name)
        if role_store.role_exists(db, new_name):
            raise DuplicateRoleError(new_name)

        role.name = new_name
        db.flush()
        updated = role_store.reassign_holders(db, old_name, new_name)
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.ROLE_RENAMED,
            ActivityCategory.PERMISSIONS,
            f"Renamed role '{old_name}' to '{new_name}' ({updated} user(s) updated)",
            target_id=role.id,
            target_type="role",
            changes={"name": {"old": old_name, "new": new_name}, "users_updated": updated},
        )
    logger.info(f"Role '{old_name}' renamed to '{new_name}', {updated} user(s) updated")
    return updated


def delete_role(
    db: Session, actor: User, role_name: str, reassign_to: str | None = None
) -> int:
    """Delete a custom role.

    Without ``reassign_to`` the deletion is refused while any user holds the
    role. With it, holders are moved to that role in the same transaction.
    Returns the number of reassigned users.
    """
    _require_admin(db, actor)
    if is_superuser_role(role_name):
        raise SuperuserRoleImmutableError(role_name)
    if reassign_to is not None:
        if reassign_to == role_name:
            raise ForbiddenError("Users cannot be reassigned to the role being deleted")
        if is_superuser_role(reassign_to):
            raise ForbiddenError("Users cannot be reassigned to the superuser role")

    with _transaction(db, role_name):
        role = role_store.require_role(db, role_name, for_update=True)
        if role.is_built_in:
            raise BuiltInRoleImmutableError(role_name)
        if reassign_to is not None:
            role_store.require_role(db, reassign_to, for_update=True)

        holders = role_store.count_holders(db, role_name)
        moved = 0
        if holders:
            if reassign_to is None:
                raise RoleInUseError(role_name, holders)
            moved = role_store.reassign_holders(db, role_name, reassign_to)

        role_id = role.id
        db.delete(role)
        db.flush()
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.ROLE_DELETED,
            ActivityCategory.PERMISSIONS,
            f"Deleted role '{role_name}'",
            target_id=role_id,
            target_type="role",
            changes={"reassigned_to": reassign_to, "users_reassigned": moved},
        )
    logger.info(f"Role '{role_name}' deleted by {actor.username}, {moved} user(s) reassigned")
    return moved

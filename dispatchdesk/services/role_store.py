# dispatchdesk/services/role_store.py
"""Persistence for roles, their permission sets and role holders.

This module is the only place that reads or writes ``Role`` and
``PermissionSet`` rows. It never commits; callers own the transaction.
"""

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Session

from dispatchdesk.exceptions import RoleNotFoundError
from dispatchdesk.models import PermissionSet, Role, User
from dispatchdesk.rbac.capabilities import normalize_capabilities


def get_role(db: Session, name: str, for_update: bool = False) -> Role | None:
    """Get a role by its (case-sensitive) name."""
    query = db.query(Role).filter(Role.name == name)
    if for_update:
        query = query.with_for_update()
    return query.first()


def require_role(db: Session, name: str, for_update: bool = False) -> Role:
    """Get a role by name or raise RoleNotFoundError."""
    role = get_role(db, name, for_update=for_update)
    if role is None:
        raise RoleNotFoundError(name)
    return role


def role_exists(db: Session, name: str) -> bool:
    return db.query(sa.exists().where(Role.name == name)).scalar()


def list_roles(db: Session) -> list[Role]:
    """Get all roles ordered by name."""
    return db.query(Role).order_by(Role.name).all()


def load_capabilities(db: Session, name: str) -> dict[str, bool] | None:
    """Read the stored capability mapping of a role.

    Returns None when the role has no permission set. The mapping comes from a
    single row and is copied, so callers never see a partially written set.
    """
    row = (
        db.query(PermissionSet.capabilities)
        .join(Role, Role.id == PermissionSet.role_id)
        .filter(Role.name == name)
        .first()
    )
    if row is None:
        return None
    return normalize_capabilities(row[0])


def add_role(
    db: Session,
    name: str,
    capabilities: dict[str, bool] | None,
    is_built_in: bool = False,
    is_superuser: bool = False,
    template_role: str | None = None,
    description: str | None = None,
) -> Role:
    """Stage a new role and, unless it is the superuser role, its permission set."""
    role = Role(
        name=name,
        is_built_in=is_built_in,
        is_superuser=is_superuser,
        template_role=template_role,
        description=description,
    )
    if not is_superuser:
        role.permission_set = PermissionSet(
            capabilities=normalize_capabilities(capabilities)
        )
    db.add(role)
    db.flush()
    return role


def write_capabilities(db: Session, role: Role, capabilities: dict[str, bool]) -> None:
    """Replace the capability mapping of a role in one row update."""
    permission_set = role.permission_set
    if permission_set is None:
        raise RoleNotFoundError(role.name)
    # Assign a new dict so the JSON column is flagged dirty as a whole
    permission_set.capabilities = normalize_capabilities(capabilities)
    db.flush()


def count_holders(db: Session, name: str) -> int:
    """Count users whose role is ``name``."""
    return db.query(User).filter(User.role == name).count()


def holder_counts(db: Session) -> dict[str, int]:
    """Count users per role name."""
    rows = db.query(User.role, sa.func.count(User.id)).group_by(User.role).all()
    return {role: count for role, count in rows}


def reassign_holders(db: Session, old_name: str, new_name: str) -> int:
    """Move every user holding ``old_name`` to ``new_name``. Returns the count."""
    return (
        db.query(User)
        .filter(User.role == old_name)
        .update({User.role: new_name}, synchronize_session="fetch")
    )


def touch_role(db: Session, role: Role) -> None:
    """Bump the version of a loaded role.

    A rename or delete of the role committed since it was loaded makes the
    flush raise ``StaleDataError``.
    """
    role.updated_at = datetime.utcnow()
    db.flush()

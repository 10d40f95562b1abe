# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management: approvals, role assignment and removal."""

import uuid

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from dispatchdesk.exceptions import ConcurrentModificationError, ForbiddenError
from dispatchdesk.models import ActivityAction, ActivityCategory, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.rbac.roles import SUPERUSER_ROLE, is_superuser_role
from dispatchdesk.services import activity_log_service, permission_service, role_store


def list_users(db: Session, actor: User) -> list[User]:
    """Get all users ordered by username."""
    permission_service.require_capability(db, actor, Capability.VIEW_USERS)
    return db.query(User).order_by(User.username).all()


def list_pending_users(db: Session, actor: User) -> list[User]:
    """Get registrations awaiting approval."""
    permission_service.require_capability(db, actor, Capability.APPROVE_USERS)
    return (
        db.query(User)
        .filter(User.approved.is_(False), User.role != SUPERUSER_ROLE)
        .order_by(User.created_at)
        .all()
    )


def approve_user(db: Session, actor: User, user: User) -> User:
    """Approve a pending registration."""
    permission_service.require_capability(db, actor, Capability.APPROVE_USERS)
    if user.approved:
        raise ValueError("User already approved")

    user.approved = True
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.USER_APPROVED,
        ActivityCategory.USER,
        f"Approved registration of {user.username}",
        target_id=user.id,
        target_type="user",
    )
    db.commit()
    db.refresh(user)
    return user


def reject_user(db: Session, actor: User, user: User) -> None:
    """Reject and remove a pending registration."""
    permission_service.require_capability(db, actor, Capability.APPROVE_USERS)
    if user.approved:
        raise ValueError("Cannot reject an approved user")
    if is_superuser_role(user.role) and not is_superuser_role(actor.role):
        raise ForbiddenError("Only a superuser can remove a superuser account")

    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.USER_REJECTED,
        ActivityCategory.USER,
        f"Rejected registration of {user.username}",
        target_id=user.id,
        target_type="user",
    )
    db.delete(user)
    db.commit()


def assign_role(db: Session, actor: User, user: User, role_name: str) -> User:
    """Assign a user to an existing role.

    Only a superuser may hand out the superuser role or change the role of
    another superuser.
    """
    permission_service.require_capability(db, actor, Capability.MANAGE_USERS)
    if (is_superuser_role(role_name) or is_superuser_role(user.role)) and not is_superuser_role(
        actor.role
    ):
        raise ForbiddenError("Only a superuser can grant or revoke the superuser role")

    try:
        role = role_store.require_role(db, role_name, for_update=True)
        # Holds the role against a concurrent rename or delete
        role_store.touch_role(db, role)
        old_role = user.role
        user.role = role_name
        activity_log_service.log_activity(
            db,
            actor,
            ActivityAction.USER_ROLE_CHANGED,
            ActivityCategory.USER,
            f"Changed role of {user.username} from '{old_role}' to '{role_name}'",
            target_id=user.id,
            target_type="user",
            changes={"role": {"old": old_role, "new": role_name}},
        )
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        raise ConcurrentModificationError(role_name) from exc
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def delete_user(db: Session, actor: User, user: User) -> None:
    """Delete a user account."""
    permission_service.require_capability(db, actor, Capability.MANAGE_USERS)
    if user.id == actor.id:
        raise ForbiddenError("You cannot delete your own account")
    if is_superuser_role(user.role) and not is_superuser_role(actor.role):
        raise ForbiddenError("Only a superuser can delete a superuser account")

    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.USER_DELETED,
        ActivityCategory.USER,
        f"Deleted user {user.username}",
        target_id=user.id,
        target_type="user",
    )
    db.delete(user)
    db.commit()


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    return db.query(User).filter(User.id == user_id).first()

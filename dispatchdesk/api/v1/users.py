# dispatchdesk/api/v1/users.py
"""User management API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_current_user, get_db, require_capability
from dispatchdesk.models import User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.user import PendingUserResponse, UserResponse, UserRoleUpdate
from dispatchdesk.services import user_service

router = APIRouter()


def _get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[User]:
    """Retrieve a list of all users in the system.

    Requires viewUsers.
    """
    return user_service.list_users(db, current_user)


@router.get(
    "/users/pending",
    response_model=list[PendingUserResponse],
    summary="List registrations awaiting approval",
)
def list_pending_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[User]:
    """Requires approveUsers."""
    return user_service.list_pending_users(db, current_user)


@router.post(
    "/users/{user_id}/approve",
    response_model=UserResponse,
    summary="Approve a registration",
)
def approve_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.APPROVE_USERS)),
) -> User:
    """Approve a pending registration.

    Requires approveUsers.
    """
    user = _get_user_or_404(db, user_id)
    try:
        return user_service.approve_user(db, current_user, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/users/{user_id}/reject",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reject a registration",
)
def reject_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.APPROVE_USERS)),
) -> None:
    """Reject and remove a pending registration.

    Requires approveUsers.
    """
    user = _get_user_or_404(db, user_id)
    try:
        user_service.reject_user(db, current_user, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put(
    "/users/{user_id}/role",
    response_model=UserResponse,
    summary="Assign a role to a user",
)
def assign_role(
    user_id: uuid.UUID,
    role_in: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.MANAGE_USERS)),
) -> User:
    """Move a user to an existing role.

    Requires manageUsers. Only a superuser can grant the superuser role.
    """
    user = _get_user_or_404(db, user_id)
    return user_service.assign_role(db, current_user, user, role_in.role)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.MANAGE_USERS)),
) -> None:
    """Requires manageUsers."""
    user = _get_user_or_404(db, user_id)
    user_service.delete_user(db, current_user, user)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service.

Authenticates users and manages their sessions. Authorization is left to
``permission_service``.
"""

import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from dispatchdesk.config import get_settings
from dispatchdesk.exceptions import AccountNotApprovedError
from dispatchdesk.models import ActivityAction, ActivityCategory, User
from dispatchdesk.models.session import Session as SessionModel
from dispatchdesk.rbac.roles import is_superuser_role
from dispatchdesk.schemas.auth import RegisterRequest
from dispatchdesk.security import get_password_hash, verify_password
from dispatchdesk.services import activity_log_service


def register_user(db: Session, data: RegisterRequest) -> User:
    """Register a new user awaiting approval."""
    user = User(
        username=data.username,
        email=data.email.lower(),
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        role=get_settings().default_user_role,
        approved=False,
        is_active=True,
    )
    db.add(user)
    db.flush()
    activity_log_service.log_activity(
        db,
        user,
        ActivityAction.USER_REGISTERED,
        ActivityCategory.AUTH,
        f"Registration submitted by {user.username}",
        target_id=user.id,
        target_type="user",
    )
    db.commit()
    db.refresh(user)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Authenticate a user by username and password.

    Raises AccountNotApprovedError for valid credentials of an account that is
    still pending approval. Superusers never need approval.
    """
    user = db.query(User).filter(User.username == username).first()
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    if not user.is_active:
        return None
    if not user.approved and not is_superuser_role(user.role):
        raise AccountNotApprovedError(username)
    return user


def create_session(db: Session, user: User) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=get_settings().session_expiry_days)

    session = SessionModel(
        user_id=user.id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    activity_log_service.log_activity(
        db,
        user,
        ActivityAction.USER_LOGIN,
        ActivityCategory.AUTH,
        f"{user.username} logged in",
        target_id=user.id,
        target_type="user",
    )
    db.commit()
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < datetime.utcnow():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return False
    user = session.user
    db.delete(session)
    activity_log_service.log_activity(
        db,
        user,
        ActivityAction.USER_LOGOUT,
        ActivityCategory.AUTH,
        f"{user.username} logged out",
        target_id=user.id,
        target_type="user",
    )
    db.commit()
    return True


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < datetime.utcnow())
        .delete()
    )
    db.commit()
    return count

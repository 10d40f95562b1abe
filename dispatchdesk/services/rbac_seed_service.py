# dispatchdesk/services/rbac_seed_service.py
import logging

from sqlalchemy.orm import Session

from dispatchdesk.models import User
from dispatchdesk.rbac.roles import DEFAULT_ROLE_CAPABILITIES, DEFAULT_ROLES, SUPERUSER_ROLE
from dispatchdesk.security import get_password_hash

from . import role_store

logger = logging.getLogger(__name__)


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with the built-in roles and their default permissions.

    This function is idempotent: existing roles and their (possibly edited)
    permissions are left untouched.
    @param db: SQLAlchemy Session object
    """
    for role_data in DEFAULT_ROLES:
        if role_store.role_exists(db, role_data["name"]):
            continue
        role_store.add_role(
            db,
            role_data["name"],
            DEFAULT_ROLE_CAPABILITIES.get(role_data["name"]),
            is_built_in=True,
            is_superuser=role_data["is_superuser"],
            description=role_data["description"],
        )
        logger.info(f"Created built-in role '{role_data['name']}'")
    db.commit()


def ensure_sysadmin_account(db: Session, username: str, password: str | None) -> User | None:
    """Create the bootstrap superuser account if no superuser exists yet."""
    if db.query(User).filter(User.role == SUPERUSER_ROLE).first():
        return None
    if not password:
        logger.warning("No superuser account exists and no bootstrap password is configured")
        return None

    user = User(
        username=username,
        email=f"{username}@localhost",
        hashed_password=get_password_hash(password),
        first_name="System",
        last_name="Administrator",
        role=SUPERUSER_ROLE,
        approved=True,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created bootstrap superuser account '{username}'")
    return user

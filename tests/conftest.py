# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_ON_STARTUP"] = "false"

from dispatchdesk.api.deps import get_db
from dispatchdesk.main import app
from dispatchdesk.models import User
from dispatchdesk.models.base import Base
from dispatchdesk.security import get_password_hash
from dispatchdesk.services.rbac_seed_service import seed_rbac_data

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpassword123"  # nosec - test-only password  # noqa: S105


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def other_session(db_session):
    """A second session on the same database, for interleaved transactions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db_session):
    """Seed the built-in roles."""
    seed_rbac_data(db_session)
    return db_session


@pytest.fixture
def make_user(db_session):
    """Factory creating a persisted user holding ``role``."""

    def factory(
        username: str,
        role: str,
        approved: bool = True,
        is_active: bool = True,
        email: str | None = None,
    ) -> User:
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            hashed_password=get_password_hash(TEST_PASSWORD),
            first_name=username.capitalize(),
            last_name="Tester",
            role=role,
            approved=approved,
            is_active=is_active,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return factory


@pytest.fixture
def sysadmin_user(seeded, make_user) -> User:
    return make_user("root", "sysadmin")


@pytest.fixture
def admin_user(seeded, make_user) -> User:
    return make_user("admin", "administrator")


@pytest.fixture
def technician_user(seeded, make_user) -> User:
    return make_user("tech", "technician")


@pytest.fixture
def basic_user(seeded, make_user) -> User:
    return make_user("basic", "user")


@pytest.fixture
def pending_user(seeded, make_user) -> User:
    return make_user("pending", "user", approved=False)


@pytest.fixture
def login(client):
    """Log the test client in as the given user."""

    def do_login(user: User) -> TestClient:
        response = client.post(
            "/api/v1/auth/login",
            json={"username": user.username, "password": TEST_PASSWORD},
        )
        assert response.status_code == 200
        return client

    return do_login


@pytest.fixture
def admin_client(login, admin_user):
    """Create an authenticated administrator test client."""
    return login(admin_user)


@pytest.fixture
def sysadmin_client(login, sysadmin_user):
    """Create an authenticated superuser test client."""
    return login(sysadmin_user)

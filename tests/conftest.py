# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_ADMIN_USERNAME"] = ""
os.environ["SEED_ADMIN_PASSWORD"] = ""

from erp_access.database import get_db
from erp_access.main import app
from erp_access.models import Company, User
from erp_access.models.base import Base
from erp_access.models.enums import UserRole
from erp_access.rbac.roles import default_matrix
from erp_access.security import get_password_hash

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpassword123"


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


@pytest.fixture
def company(db_session) -> Company:
    """Create the main test company."""
    company = Company(name="North Unit", code="NORTH", location="Pune")
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company


@pytest.fixture
def other_company(db_session) -> Company:
    """Create a second company for scoping tests."""
    company = Company(name="South Unit", code="SOUTH", location="Chennai")
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company


@pytest.fixture
def make_user(db_session):
    """Factory creating a persisted user seeded with its role defaults."""

    def _make_user(
        username: str,
        role: UserRole,
        company: Company | None = None,
        is_active: bool = True,
        permissions: dict | None = None,
    ) -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            hashed_password=get_password_hash(TEST_PASSWORD),
            role=role,
            is_active=is_active,
            company_id=company.id if company else None,
            permissions=permissions if permissions is not None else default_matrix(role),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def super_admin(make_user) -> User:
    """Create a Super Admin with no company."""
    return make_user("superadmin", UserRole.SUPER_ADMIN)


@pytest.fixture
def unit_head(make_user, company) -> User:
    """Create a Unit Head for the main company."""
    return make_user("unithead", UserRole.UNIT_HEAD, company=company)


@pytest.fixture
def login(client):
    """Log the shared test client in as the given user."""

    def _login(user: User, password: str = TEST_PASSWORD):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": user.username, "password": password},
        )
        assert response.status_code == 200, response.text
        return response

    return _login


@pytest.fixture
def admin_client(client, super_admin, login):
    """Create an authenticated Super Admin test client."""
    login(super_admin)
    return client


@pytest.fixture
def session_factory(db_session):
    """Factory for independent sessions on the test database."""
    return TestingSessionLocal

"""Campus Portal test configuration and fixtures."""

import os

# Must be set before the application modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IDENTITY_MODE"] = "header"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-key-for-testing"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app import app
from core.database import enable_sqlite_foreign_keys, get_db
from models.base import Base
from models.user import UserModel
from utils.user_manager import UserManager

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(autouse=True)
def database() -> Generator[None, None, None]:
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client with the request-scoped session bound to the test engine."""

    def override_get_db():
        db = TestSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session):
    """Factory creating users directly in the database."""
    counter = {"n": 0}

    def _make_user(role: str = "student", status: str = "active", name: str = None) -> UserModel:
        counter["n"] += 1
        n = counter["n"]
        return UserManager(db_session).create_user(
            name=name or f"{role.title()} {n}",
            email=f"{role}{n}@campus.edu",
            role=role,
            status=status,
        )

    return _make_user


def auth_headers(user: UserModel) -> Dict[str, str]:
    return {"x-user-id": user.user_id, "x-user-role": user.role}


@pytest.fixture
def admin(make_user) -> UserModel:
    return make_user("admin")


@pytest.fixture
def professor(make_user) -> UserModel:
    return make_user("professor")


@pytest.fixture
def student(make_user) -> UserModel:
    return make_user("student")


@pytest.fixture
def club(make_user) -> UserModel:
    return make_user("club")


@pytest.fixture
def headers():
    """Identity headers for a stored user."""
    return auth_headers

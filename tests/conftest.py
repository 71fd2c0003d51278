"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time, so these must be set first
os.environ.setdefault("SEED_USER_TYPES_ON_STARTUP", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from mycap import models  # noqa: E402, F401
from mycap.database import Base, get_db  # noqa: E402
from mycap.main import app  # noqa: E402
from mycap.services.user_service import seed_user_types  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's identity."""

    def __init__(
        self, *args, user_id: int | None = None, username: str = "", email: str = "", **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL") + "_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session with seeded user types, cleaned up afterwards."""
    session = TestingSessionLocal()
    seed_user_types(session, ["Free", "Premium", "Pro"])

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def user_types(db):
    """Seeded user types keyed by name."""
    from mycap.models.user import UserType

    return {t.name: t for t in db.query(UserType).all()}


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Factory that registers a user over the API and returns auth headers."""

    def _register(username: str, **overrides) -> AuthHeaders:
        payload = {
            "name": username.title(),
            "username": username,
            "email": f"{username}@example.com",
            "password": "s3cr3tp45sw0rd",
        }
        payload.update(overrides)
        response = client.post("/api/v1/register", json=payload)
        assert response.status_code == 201, response.json()
        data = response.json()["data"]
        return AuthHeaders(
            {"Authorization": f"Bearer {data['access_token']}"},
            user_id=data["user"]["id"],
            username=username,
            email=payload["email"],
        )

    return _register


@pytest.fixture
def auth_headers(register):
    """Create a user and return auth headers with user info."""
    return register("dinopuguh")

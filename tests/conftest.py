"""Shared fixtures: in-memory SQLite, a TestClient wired to it, user payloads."""

import os

# Must be set before app.core.config is imported
os.environ.setdefault("SECRET_KEY", "test-signing-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models import user as _user_models  # noqa: F401  registers all tables
from app.main import app

TEST_SECRET = os.environ["SECRET_KEY"]


def user_payload(n: int = 1, **overrides) -> dict:
    """A valid registration payload; `n` varies every unique field."""
    payload = {
        "firstName": "Ayesha",
        "lastName": "Khan",
        "email": f"ayesha.khan{n}@gmail.com",
        "password": "Abcdefg1!",
        "phone": f"300123{n:04d}",
        "countryCode": f"+92{n:02d}",
        "cnic": f"35202{n:08d}",
        "address": {
            "country": "Pakistan",
            "state": "Punjab",
            "city": "Lahore",
            "streetAddress": "12 Main Boulevard, Gulberg",
            "postalCode": "54000",
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user through the API and return (token, user json)."""
    def _register(n: int = 1, **overrides):
        resp = client.post("/api/v1/auth/register", json=user_payload(n, **overrides))
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["access_token"], body["user"]
    return _register


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}

"""Pytest configuration and shared fixtures.

Set DATABASE_URL and auth env vars before any propman import so settings pick them up.
Provides reusable fixtures: in-memory db, session, TestClient, user/property factories.
"""
import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Force SQLite before any app import
os.environ["DATABASE_URL"] = "sqlite+pysqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["TRUST_CALLER_HEADER"] = "true"

from fastapi.testclient import TestClient

from propman.core.security import create_access_token
from propman.db.crud.properties import create_property
from propman.db.session import get_db
from propman.main import app
from propman.models import Base, Property, Role, User


# ── Database fixtures ────────────────────────────────────────────────

@pytest.fixture()
def db_engine():
    """In-memory SQLite engine with all tables, one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine):
    """SQLAlchemy session bound to in-memory SQLite."""
    Session = sessionmaker(bind=db_engine, autoflush=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture()
def client(db_engine):
    """TestClient whose get_db dependency uses the in-memory engine."""
    TestingSession = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)

    def _get_test_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── Factories ────────────────────────────────────────────────────────

def make_user(db, role: Role = Role.RENTER, **kwargs) -> User:
    """Create and commit a user. password_hash is a placeholder unless given."""
    n = db.query(User).count() + 1
    defaults = {
        "name": f"User {n}",
        "email": f"user{n}-{role.value.lower()}@example.com",
        "phone": "+910000000000",
        "password_hash": "not-a-real-hash",
        "role": role.value,
    }
    defaults.update(kwargs)
    user = User(**defaults)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_property(db, **kwargs) -> Property:
    """Create and commit a property with sensible defaults."""
    defaults = {
        "title": "2BHK near metro",
        "location": "Bengaluru",
        "rent": 25000.0,
        "bhk": 2,
        "bath": 2,
        "size": 1100.0,
        "property_type": "APARTMENT",
        "furnishing": "SEMI_FURNISHED",
        "image_urls": ["/uploads/p1.jpg"],
    }
    defaults.update(kwargs)
    return create_property(db, **defaults)


def caller(user_id: int) -> dict[str, str]:
    """Headers asserting the caller for /favorites."""
    return {"User-Id": str(user_id)}


def bearer(user: User) -> dict[str, str]:
    token = create_access_token(sub=user.email, user_id=user.id, role=user.role, name=user.name)
    return {"Authorization": f"Bearer {token}"}


# ── Markers ──────────────────────────────────────────────────────────

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks slow tests")
    config.addinivalue_line("markers", "integration: marks integration tests")
    config.addinivalue_line("markers", "unit: marks unit tests")

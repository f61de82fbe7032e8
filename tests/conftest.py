"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- FastAPI test client
- Repositories and a controllable clock
- Test data factories
"""

import os
from datetime import datetime, timedelta
from typing import Generator

# Keep the application engine off MySQL before anything imports app.config
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.main import app
from app.infrastructure.persistence.models import Base
from app.infrastructure.persistence.db import get_db
from app.core.dependencies import get_city_repository
from app.infrastructure.persistence.repositories.in_memory_city_repository import (
    InMemoryCityRepository,
)
from app.infrastructure.persistence.repositories.sqlalchemy_city_repository import (
    SQLAlchemyCityRepository,
)


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session_factory(test_db_engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)


@pytest.fixture(scope="function")
def test_db_session(test_session_factory) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = test_session_factory()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(test_db_session) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by the SQLAlchemy repository."""

    def override_get_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_city_repository] = lambda: SQLAlchemyCityRepository(test_db_session)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def in_memory_client() -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by a fresh in-memory repository."""
    repository = InMemoryCityRepository()
    app.dependency_overrides[get_city_repository] = lambda: repository

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# REPOSITORY FIXTURES
# ==============================================================================

@pytest.fixture
def in_memory_repository():
    return InMemoryCityRepository()


@pytest.fixture
def sqlalchemy_repository(test_db_session):
    return SQLAlchemyCityRepository(test_db_session)


@pytest.fixture(params=["in_memory", "sqlalchemy"])
def city_repository(request):
    """Run a test once per repository implementation."""
    return request.getfixturevalue(f"{request.param}_repository")


class FakeClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return FakeClock()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_city_payload():
    """Sample create-city body."""
    return {
        "id": "city",
        "name": "cityname",
        "description": "description",
        "location": {"longitude": 1.0, "latitude": -1.0},
    }


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )

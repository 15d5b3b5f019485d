"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and that the
application is configured for tests before any project module is imported.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Generator, List

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db
from domain.models import Base, build_engine
from main import app


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session, including the ones
    opened by TestClient worker threads, sees the same database.
    """
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, future=True)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """Database session for service and repository tests."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# =============================================================================
# HTTP CLIENT FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def client_factory(session_factory) -> Generator[Callable[[], TestClient], None, None]:
    """
    Build independent TestClients against the test database.

    Each client has its own cookie jar, so one client per user keeps
    sessions apart in multi-user scenarios.
    """

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    clients: List[TestClient] = []

    def make_client() -> TestClient:
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client

    try:
        yield make_client
    finally:
        for test_client in clients:
            test_client.close()
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture(scope="function")
def client(client_factory) -> TestClient:
    return client_factory()

"""Pytest configuration and fixtures."""

import os

# Must be set before the app module reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from webinar_manager import models  # noqa: E402
from webinar_manager.database import Base, get_db  # noqa: E402
from webinar_manager.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so every thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

CreateWebinarFunc = Callable[..., models.Webinar]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def create_test_webinar(db_session: Session) -> CreateWebinarFunc:
    """Fixture factory inserting webinar rows directly through the ORM."""

    def _create_webinar(**overrides: Any) -> models.Webinar:
        data: dict[str, Any] = {
            "id": "webinar-id",
            "organizer_id": "test-user",
            "title": "Webinar title",
            "start_date": datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
            "end_date": datetime(2024, 1, 1, 1, 0, tzinfo=UTC),
            "seats": 10,
        }
        data.update(overrides)
        webinar = models.Webinar(**data)
        db_session.add(webinar)
        db_session.commit()
        db_session.refresh(webinar)
        return webinar

    return _create_webinar

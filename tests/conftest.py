"""
Pytest Configuration and Fixtures

Provides reusable async fixtures for testing the AviLearn Backend.
"""

import os
import uuid
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; tests never need a real server database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, enable_sqlite_foreign_keys, get_db
from app.models import Category, User, UserRole, Video


# ==================== Database Fixtures ====================

@pytest.fixture
def mock_async_session() -> AsyncMock:
    """
    Create a mock async database session.

    Returns:
        AsyncMock configured to behave like AsyncSession.
    """
    session = AsyncMock(spec=AsyncSession)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.delete = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Real session on a fresh in-memory SQLite database.

    StaticPool keeps the single in-memory connection alive for the whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def student(db_session: AsyncSession) -> User:
    user = User(
        username="student1",
        email="student1@example.com",
        password_hash="not-a-real-hash",
        role=UserRole.STUDENT,
        is_approved=True,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def video(db_session: AsyncSession) -> Video:
    category = Category(name="PPL(Private Pilot License)", icon="BadgeCheck")
    db_session.add(category)
    await db_session.flush()

    item = Video(title="Preflight inspection", duration=100, category_id=category.id)
    db_session.add(item)
    await db_session.commit()
    return item


# ==================== User Fixtures ====================

def make_user(role: UserRole = UserRole.STUDENT, is_approved: bool = True) -> User:
    """Detached user object for dependency overrides."""
    return User(
        id=uuid.uuid4(),
        username="admin" if role == UserRole.ADMIN else "student1",
        email="admin@example.com" if role == UserRole.ADMIN else "student1@example.com",
        password_hash="not-a-real-hash",
        role=role,
        is_approved=is_approved,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def student_user() -> User:
    return make_user(UserRole.STUDENT)


@pytest.fixture
def admin_user() -> User:
    return make_user(UserRole.ADMIN)


# ==================== API Fixtures ====================

@pytest.fixture
def api_client(mock_async_session):
    """
    TestClient with the database dependency replaced by a mock session.

    Tests override the user dependencies they need on ``api_client.app``.
    """
    from app.main import app

    async def _override_get_db():
        yield mock_async_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


# ==================== HTTP Client Fixtures ====================

@pytest.fixture
def mock_httpx_response():
    """
    Factory fixture to create mock httpx responses.

    Usage:
        response = mock_httpx_response(status_code=200, json_data={"key": "value"})
    """
    def _create_response(status_code: int = 200, json_data=None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data if json_data is not None else {}
        response.text = text
        return response
    return _create_response


# ==================== Tracking Fixtures ====================

class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSink:
    """ProgressSink that records reports and can be told to fail."""

    def __init__(self, fail_with: Exception | None = None):
        self.reports = []
        self.fail_with = fail_with

    async def send_progress(self, report):
        self.reports.append(report)
        if self.fail_with is not None:
            raise self.fail_with
        return report.to_payload()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> RecordingSink:
    return RecordingSink(fail_with=ConnectionError("network down"))

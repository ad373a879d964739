"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from uuid import uuid4

# Configure the app before anything imports notekeep.config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789-abcdefghijklmnop")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DEBUG", "true")
# Tell app lifespan to skip real DB init
os.environ["NOTEKEEP_SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notekeep.config import Settings  # noqa: E402
from notekeep.core.models.base import BaseModel  # noqa: E402
from notekeep.core.models.note import Note  # noqa: E402
from notekeep.core.models.user import User  # noqa: E402
from notekeep.database import get_db_session  # noqa: E402
from notekeep.main import app  # noqa: E402
from notekeep.security.jwt import create_access_token  # noqa: E402
from notekeep.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture(scope="session")
def test_settings():
    """Settings used by tests: SQLite in-memory DB and a fixed signing key."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=os.environ["SECRET_KEY"],
        debug=True,
        log_to_file=False,
    )


@pytest.fixture
async def test_engine(test_settings):
    """Fresh SQLite in-memory engine with the schema created, one per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the per-test engine."""
    async_session_maker = async_sessionmaker(test_engine, expire_on_commit=False)

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def override_get_db(test_session):
    """Override the get_db dependency."""

    async def _override_get_db():
        yield test_session

    return _override_get_db


@pytest.fixture
def test_app(override_get_db):
    """FastAPI app with the DB dependency pointed at the test session."""
    app.dependency_overrides[get_db_session] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async test client running on the same event loop as the DB fixtures."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "username": f"testuser_{uuid4().hex[:8]}",
        "password": "TestPassword123!",
    }


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    user = User(
        username=test_user_data["username"],
        password_hash=hash_password(test_user_data["password"]),
    )

    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)

    # Add the plain password to the user object for testing
    user.plain_password = test_user_data["password"]

    return user


@pytest.fixture
def auth_headers(test_user):
    """Authentication headers with a valid JWT for the test user."""
    access_token = create_access_token(test_user.username)
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def test_note_data():
    """Sample note data for testing."""
    return {
        "title": "Test Note",
        "content": "This is a test note content",
    }


@pytest.fixture
async def test_note(test_session, test_note_data):
    """Create a test note in the database."""
    from datetime import datetime, timezone

    note = Note(
        title=test_note_data["title"],
        content=test_note_data["content"],
        created_at=datetime.now(timezone.utc),
    )

    test_session.add(note)
    await test_session.commit()
    await test_session.refresh(note)

    return note

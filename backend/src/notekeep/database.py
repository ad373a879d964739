"""Async engine and session factory."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import get_settings
from .core.models.base import BaseModel

settings = get_settings()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the engine, with driver-specific options.

    SQLite connections are shared across the event loop's tasks, other
    backends get a pre-ping so stale pooled connections are replaced.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(
            database_url, echo=echo, connect_args={"check_same_thread": False}
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.database_url, echo=settings.database_echo)

# objects stay readable after commit, services build responses from them
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session():
    """Yield one session per request, rolled back if the request fails."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables():
    """Create the users and notes tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from busbooking.core import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by *settings*."""
    options: Dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,  # Enable connection health checks
    }
    # SQLite drivers manage their own pool; pool_size is rejected there.
    if not settings.is_sqlite:
        options["pool_size"] = settings.DB_POOL_SIZE
    return create_async_engine(settings.DB_DSN, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

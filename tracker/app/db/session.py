"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support (aiosqlite by default).
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def get_db():
    """
    Yield an async database session and ensure it's properly closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Create all registered tables on the given engine.
    
    Defaults to the engine built from settings.
    
    Models must be imported before this runs so they are registered with Base.
    """
    # Registers the parcel table with Base
    import tracker.app.models.parcel  # noqa: F401

    if bind is None:
        bind = engine
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

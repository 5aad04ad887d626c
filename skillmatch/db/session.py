from typing import AsyncIterator
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from skillmatch.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # SQL echo only in development mode
    return create_async_engine(
        str(settings.DATABASE_URL),
        echo=settings.is_dev_mode,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a session from the factory built at startup (see ``skillmatch.main.lifespan``)."""
    async with request.app.state.session_factory() as session:
        yield session

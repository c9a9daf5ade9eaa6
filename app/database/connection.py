from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import AsyncAdaptedQueuePool
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger("database")


def build_engine(database_url: str = None) -> AsyncEngine:
    """Create the async engine for the relational record store."""
    url = database_url or settings.DATABASE_URL

    # SQLite (tests, local runs) uses its own pool and takes no server settings
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False, future=True)

    return create_async_engine(
        url,
        echo=False,
        connect_args={
            "server_settings": {
                "application_name": "fittrack_backend",
                "jit": "off",
            },
            "command_timeout": 30,
        },
        poolclass=AsyncAdaptedQueuePool,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
        future=True
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False
    )


@asynccontextmanager
async def async_session(session_factory: async_sessionmaker):
    """Context manager for a database session that rolls back on error."""
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

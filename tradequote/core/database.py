"""
Database configuration and session management
"""

from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
import structlog

from tradequote.core.config import get_settings
from tradequote.core.errors import AppError, InternalFailure

logger = structlog.get_logger(__name__)
settings = get_settings()


def build_engine(url: str, **kwargs):
    """Create the async engine, bounding the pool for server databases"""
    url = url.replace("postgresql://", "postgresql+asyncpg://")
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_size", settings.DB_POOL_SIZE)
        kwargs.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
        kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(url, echo=settings.DEBUG, **kwargs)


# Create async engine
async_engine = build_engine(settings.DATABASE_URL)

# Create async session factory
async_session_maker = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db(engine=None):
    """Initialize database tables"""
    # Register every table on the metadata before create_all
    import tradequote.models  # noqa: F401

    engine = engine or async_engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created")


async def get_session():
    """Dependency to get database session"""
    async with async_session_maker() as session:
        yield session


@asynccontextmanager
async def unit_of_work(
    session: AsyncSession,
    failure_message: str = "Database operation failed",
    on_integrity_error: Optional[AppError] = None,
):
    """Commit everything done in the block at once, or roll all of it back.

    Store errors are logged and surfaced as InternalFailure; a uniqueness or
    foreign-key violation is surfaced as on_integrity_error when given.
    """
    try:
        yield session
        await session.commit()
    except AppError:
        await session.rollback()
        raise
    except IntegrityError as e:
        await session.rollback()
        if on_integrity_error is not None:
            logger.warning(f"{failure_message}: integrity error", error=str(e.orig))
            raise on_integrity_error from e
        logger.exception(failure_message)
        raise InternalFailure(failure_message)
    except SQLAlchemyError:
        await session.rollback()
        logger.exception(failure_message)
        raise InternalFailure(failure_message)

"""Database Session Manager - owned async connection pool with automatic rollback and health checks.

Invariants:
    - One manager per application, created in the lifespan and kept on app.state.db
      (never a module-level singleton)
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Each request acquires one session for its statement sequence and releases it
      on scope exit
    - Driver-level SQLAlchemy exceptions escaping a session become StoreUnavailableError
    - close() disposes the pool and is awaited before process exit

Design Decisions:
    - IntegrityError is re-raised untouched: repositories decide whether it is a
      conflict (unique violation) or an internal failure
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from formservice.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError:
            await session.rollback()
            raise
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreUnavailableError(str(e), "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreUnavailableError(str(e), "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreUnavailableError(str(e), "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for the /health check)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session

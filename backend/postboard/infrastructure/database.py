"""Storage Handle: the single long-lived connection shared by every repository.

Invariants:
    - Exactly one DB-API connection per process (StaticPool); every AsyncSession
      checks out that same connection
    - The connection runs in AUTOCOMMIT: each statement commits on its own, so a
      session closing (pool reset rollback) never discards another session's write
    - init_db opens the connection eagerly: an unreachable store fails startup
    - storage_errors() maps every SQLAlchemy exception to StorageError
    - SQLite connections run with PRAGMA foreign_keys=ON

Design Decisions:
    - Module-level db_manager initialized by the FastAPI lifespan, released on shutdown
    - No reconnect, no retries: a mid-query fault surfaces from the repository call
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from postboard.core.errors import StorageError
from postboard.db.base import Base
import postboard.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns the engine bound to one persistent connection."""

    def __init__(self, database_url: str):
        self.engine = create_async_engine(
            database_url, poolclass=StaticPool, isolation_level="AUTOCOMMIT",
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def open(self) -> None:
        """Connect and create missing tables. Raises if the store is unreachable."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Storage connection opened",
            extra={"operation": "open"},
        )

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Storage connection released", extra={"operation": "close"})

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def ping(self) -> None:
        """Round-trip a trivial statement. Raises StorageError when unreachable."""
        async with self.session() as db:
            async with storage_errors(db, "ping"):
                await db.execute(text("SELECT 1"))


@asynccontextmanager
async def storage_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Translate SQLAlchemy failures inside the block into StorageError."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.error(
            f"DB integrity error: {e}", extra={"operation": operation},
        )
        raise StorageError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        await session.rollback()
        logger.error(
            f"DB operational error: {e}", extra={"operation": operation},
        )
        raise StorageError("Connection or operational error", operation) from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error: {e}", extra={"operation": operation})
        raise StorageError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
        raise StorageError("Database operation failed", operation) from e


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


async def init_db(database_url: str) -> DatabaseSessionManager:
    global db_manager
    manager = DatabaseSessionManager(database_url)
    await manager.open()
    db_manager = manager
    return manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session

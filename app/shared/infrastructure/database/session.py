# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session and properly handles saving or undoing changes.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with dependency injection for FastAPI,
# transaction handling, and session lifecycle management across all database operations.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/plant_care/presentation/dependencies.py (repository wiring)
# - app/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, TransactionError
from app.shared.infrastructure.database.connection import db_manager

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self) -> None:
        """Initialize the session factory with database engine."""
        if not db_manager.is_initialized:
            raise DatabaseError("Session initialization failed: database engine not initialized")

        self._session_factory = async_sessionmaker(
            db_manager.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )
        logger.info("Database session factory initialized")

    def reset(self) -> None:
        self._session_factory = None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Any exception raised while the session is in use rolls the transaction
        back; only SQLAlchemy errors are translated, everything else propagates
        unchanged so request validation and domain errors keep their status.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If SQLAlchemy fails while the session is in use
            TransactionError: If the final commit fails
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception:
            await session.rollback()
            logger.debug("Transaction rolled back")
            raise

        else:
            try:
                await session.commit()
                logger.debug("Database transaction committed successfully")
            except exc.SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Commit failed, transaction rolled back: {e}")
                raise TransactionError(f"Transaction failed: {e}", operation="commit") from e

        finally:
            await session.close()
            logger.debug("Database session closed")

    @property
    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    session_manager.initialize()


# FastAPI dependency for getting database sessions
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.post("/plants")
        async def create_plant(
            plant_data: PlantCreateRequest,
            db: AsyncSession = Depends(get_db_session)
        ):
            ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session

# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens (and later closes) the line to the database where plants, care tasks and the activity log
# are kept, and can tell the health endpoints whether that line is working.
#
# 🧪 Purpose (Technical Summary):
# Owns the process-wide async SQLAlchemy engine: builds engine options from settings (pool tuning
# only for server databases), turns on SQLite foreign keys, probes the database with retries and
# creates tables from the shared declarative Base when DB_AUTO_CREATE is set.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - aiosqlite / asyncpg (async drivers, selected by DATABASE_URL)
# - app/shared/config/settings.py
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session factory)
# - app/modules/plant_care/infrastructure/database/models.py (Base)
# - app/main.py (lifespan), app/api/v1/health.py (probes)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)

PROBE_ATTEMPTS = 3
PROBE_BACKOFF_SECONDS = 1.0


class Base(DeclarativeBase):
    """Declarative base for the plants, tasks and activities tables."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # Task cascade and activity set-null depend on this pragma.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _status(healthy: bool, error: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "status": "healthy" if healthy else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if error:
        payload["error"] = error
    return payload


class DatabaseConnectionManager:
    """Lifecycle and health of the single async engine."""

    def __init__(self, attempts: int = PROBE_ATTEMPTS, backoff: float = PROBE_BACKOFF_SECONDS):
        self._engine: Optional[AsyncEngine] = None
        self._attempts = attempts
        self._backoff = backoff

    @staticmethod
    def engine_options() -> Dict[str, Any]:
        settings = get_settings()
        options: Dict[str, Any] = {
            "url": settings.DATABASE_URL,
            "echo": settings.DEBUG and not settings.is_testing,
        }
        if not settings.is_sqlite:
            options.update(
                pool_pre_ping=True,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
            )
        return options

    async def initialize(self) -> None:
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database engine...")
        engine = create_async_engine(**self.engine_options())
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._engine = engine

        health = await self.health_check()
        if health["status"] != "healthy":
            logger.error(f"Database unreachable at startup: {health.get('error')}")
            await self.close()
            raise ConnectionError(health.get("error", "Database unreachable"))

        logger.info(f"Database engine ready ({engine.dialect.name})")

    async def health_check(self) -> Dict[str, Any]:
        """
        Run ``SELECT 1``, retrying with exponential backoff.

        Never raises; the result carries ``status`` and, when unhealthy, ``error``.
        """
        if self._engine is None:
            return _status(False, "Database engine not initialized")

        last_error = ""
        for attempt in range(1, self._attempts + 1):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                return _status(True)
            except Exception as e:
                last_error = str(e)
                logger.warning(f"Database probe {attempt}/{self._attempts} failed: {e}")
                if attempt < self._attempts:
                    await asyncio.sleep(self._backoff * 2 ** (attempt - 1))

        return _status(False, f"Database health check failed after {self._attempts} attempts: {last_error}")

    async def create_tables(self) -> None:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        # Registers the ORM tables on Base.metadata
        import app.modules.plant_care.infrastructure.database.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    def get_connection_info(self) -> Dict[str, Any]:
        """Dialect and pool status for the detailed health endpoint."""
        if self._engine is None:
            return {"status": "not_initialized"}
        return {
            "status": "initialized",
            "dialect": self._engine.dialect.name,
            "pool": self._engine.pool.status(),
        }

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


db_manager = DatabaseConnectionManager()


async def init_database() -> None:
    """Start the engine and, with DB_AUTO_CREATE, create missing tables."""
    await db_manager.initialize()
    if get_settings().DB_AUTO_CREATE:
        await db_manager.create_tables()


async def close_database() -> None:
    await db_manager.close()


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()

# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Configuration file that tells Alembic how to connect to the database and
# run migrations safely, whether the database is a local SQLite file or PostgreSQL.
# 🧪 Purpose (Technical Summary):
# Alembic environment configuration for database migrations, handling async connections,
# model imports, and environment-specific settings for the Plant Care Tracker.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy (ORM, async engine)
# - aiosqlite / asyncpg (async drivers)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)
# - Development and production deployment

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

# Load environment variables
load_dotenv()

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

# Import the declarative base and register the plant care models on it
from app.shared.infrastructure.database.connection import Base  # noqa: E402
from app.modules.plant_care.infrastructure.database import models  # noqa: E402,F401
from app.shared.config.settings import get_settings  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_database_url() -> str:
    """
    Get the async database URL.

    DATABASE_URL from the environment (or .env) wins; otherwise the
    application settings default is used.
    """
    return os.getenv("DATABASE_URL") or get_settings().DATABASE_URL


def _configure_options(url: str) -> dict:
    # SQLite cannot ALTER most constraints in place
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Emit SQL for the plants, tasks and activities schema without connecting."""
    url = get_database_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(connection=connection, **_configure_options(get_database_url()))

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # Same async driver as the app (aiosqlite or asyncpg)
    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

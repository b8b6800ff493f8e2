# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# Reads the app's knobs (where the database lives, how chatty the logs are, which timezone decides
# when "today" starts for your plants) from the environment or a .env file.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model for the Plant Care Tracker. Choice-like fields are normalized and checked
# against fixed sets, CARE_TIMEZONE must resolve to an IANA zone, and a cached get_settings()
# hands out one instance per process.
#
# 🔗 Dependencies:
# - pydantic, pydantic-settings
# - zoneinfo (tzdata on hosts without a zone database)
#
# 🔄 Connected Modules / Calls From:
# - app.main, app.api (health, middleware)
# - Database connection manager and alembic env
# - Logging setup
# - Plant care presentation dependencies (clock, dashboard limits)

from functools import lru_cache
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


def _one_of(value: str, allowed: tuple, label: str) -> str:
    if value not in allowed:
        raise ValueError(f"{label} must be one of {list(allowed)}")
    return value


class Settings(BaseSettings):
    """Environment-driven configuration; names match the environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Plant Care Tracker API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Plant care tracking with watering schedules, care tasks and activity logs"
    ENVIRONMENT: str = Field(default="development", description="One of development/staging/production/test")
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="json (python-json-logger) or text")
    LOG_FILE: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True
    WORKERS: int = Field(default=1, ge=1)

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./plant_care.db",
        description="SQLAlchemy async URL (aiosqlite locally, asyncpg for PostgreSQL)"
    )
    DB_AUTO_CREATE: bool = Field(
        default=True,
        description="Create missing tables on startup; production runs alembic instead"
    )
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # CORS
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173,http://localhost:8081",
        description="Comma-separated origins of the web and mobile clients"
    )
    CORS_ALLOW_CREDENTIALS: bool = True

    # Care scheduling
    CARE_TIMEZONE: str = Field(
        default="UTC",
        description="Zone whose midnight splits task buckets and calendar days"
    )
    DASHBOARD_ATTENTION_LIMIT: int = Field(default=3, ge=1)
    DASHBOARD_RECENT_ACTIVITY_LIMIT: int = Field(default=4, ge=1)
    RECENTLY_ADDED_LIMIT: int = Field(default=5, ge=1)

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return _one_of(v.lower(), ENVIRONMENTS, "Environment")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return _one_of(v.upper(), LOG_LEVELS, "Log level")

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return _one_of(v.lower(), LOG_FORMATS, "Log format")

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Every origin needs an http(s) scheme, or is the ``*`` wildcard."""
        for origin in (part.strip() for part in v.split(",")):
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    @field_validator("CARE_TIMEZONE")
    @classmethod
    def validate_care_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def care_timezone(self) -> ZoneInfo:
        """Timezone used by the request clock."""
        return ZoneInfo(self.CARE_TIMEZONE)

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


@lru_cache()
def get_settings() -> Settings:
    """
    Process-wide settings instance.

    Tests that change the environment call ``get_settings.cache_clear()``.
    """
    return Settings()

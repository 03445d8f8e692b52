"""
Database configuration.

Loaded from environment variables (prefix DB_) or .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",  # Ignore extra fields from .env
    )

    # Async driver URL; use postgresql+asyncpg://... in production
    database_url: str = "sqlite+aiosqlite:///./warehouse_ordering.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False

    # Test connections before using
    pool_pre_ping: bool = True

    # Create missing tables on startup
    create_schema: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

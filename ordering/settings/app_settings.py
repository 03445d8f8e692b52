from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from ordering.settings.database_settings import DatabaseSettings
from ordering.settings.logging_settings import LoggingSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    app_name: str = "Warehouse Ordering API"
    database: DatabaseSettings
    logging: LoggingSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        logging=LoggingSettings(),
    )

# Settings package
from ordering.settings.app_settings import AppSettings, get_app_settings
from ordering.settings.database_settings import DatabaseSettings
from ordering.settings.logging_settings import LoggingSettings

__all__ = ["AppSettings", "DatabaseSettings", "LoggingSettings", "get_app_settings"]

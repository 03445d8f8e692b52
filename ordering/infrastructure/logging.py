"""
Logging infrastructure.

Modules log through `logging.getLogger(__name__)`; this module attaches
handlers and levels to the package loggers once at startup.
"""
import logging
from typing import Optional

from ordering.settings import LoggingSettings


PACKAGE_LOGGERS = ("ordering", "apps")


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the loggers of the `ordering` and `apps` packages.

    Args:
        settings: Logging settings (loaded from environment when omitted)
    """
    settings = settings or LoggingSettings()
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(settings.format))
            logger.addHandler(handler)
        logger.setLevel(level)

"""
Logging setup for applications embedding rastercore.

The library only creates module loggers; configuring handlers is left to
the application, which can call configure_logging() once at startup.
"""

import logging
from typing import Optional

from rastercore.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.logging.level),
        format=settings.logging.format,
    )
    logging.getLogger(__name__).debug(f"Logging configured at {settings.logging.level}")

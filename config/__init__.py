"""Application configuration utilities."""

from .logger import get_logger, setup_logging
from .settings import DEFAULT_APP_TITLE, DEFAULT_EXPORT_PREFIX, Settings, get_settings

__all__ = [
    "DEFAULT_APP_TITLE",
    "DEFAULT_EXPORT_PREFIX",
    "Settings",
    "get_logger",
    "get_settings",
    "setup_logging",
]

"""Logging configuration for BudgetLens.

Logs to the console and, when ``log_dir`` is configured, to a dated file.
"""

from __future__ import annotations

import logging
from datetime import date

from .settings import Settings

LOGGER_NAME = "budgetlens"


def setup_logging(settings: Settings) -> logging.Logger:
    """Set up application logging with console and optional file handlers."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    # Streamlit reruns the script on every interaction
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = settings.log_dir / f"budgetlens-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a named child of it."""

    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)

"""Centralised configuration handling for BudgetLens."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APP_TITLE = "即時財務預算分析系統"
DEFAULT_EXPORT_PREFIX = "財務分析報告"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    app_title: str = DEFAULT_APP_TITLE
    currency_symbol: str = "$"
    export_prefix: str = DEFAULT_EXPORT_PREFIX
    seed_demo_items: bool = True
    rules_path: Path | None = None
    log_level: str = "INFO"
    log_dir: Path | None = None

    model_config = SettingsConfigDict(env_prefix="BUDGET_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("budget")
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in Settings.model_fields}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})

"""Shared fixtures for the BudgetLens test-suite."""

from __future__ import annotations

import pytest
import streamlit as st

from analytics.categorisation import classify
from config.settings import get_settings
from core import Item, ItemStore


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    classify.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def seeded_store() -> ItemStore:
    return ItemStore.seeded()


@pytest.fixture()
def sample_items() -> list[Item]:
    return [
        Item(id=1, name="Facebook 廣告投放", spend=32000.0, budget=30000.0),
        Item(id=2, name="辦公室文具", spend=1500.0, budget=1000.0),
        Item(id=3, name="Google 關鍵字", spend=18000.0, budget=25000.0),
        Item(id=4, name="神秘支出", spend=500.0, budget=0.0),
        Item(id=5, name="AWS 雲端伺服器", spend=12500.0, budget=15000.0),
    ]

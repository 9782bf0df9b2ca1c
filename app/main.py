"""BudgetLens dashboard with responsive card layout."""

from __future__ import annotations

import streamlit as st

from analytics.categorisation import DEFAULT_RULES, CategoryRule, RuleConfigError, load_category_rules
from app.layout import NAV_LINKS, determine_active_page, inject_css, render_navbar
from app.pages import render_categories_page, render_overview_page
from config import Settings, get_logger, get_settings, setup_logging
from core import ItemStore
from core.dashboard import prepare_dashboard_data

STORE_KEY = "item_store"

logger = get_logger("app")


def _get_store(settings: Settings) -> ItemStore:
    """Return the session's item store, creating it on first run."""

    if STORE_KEY not in st.session_state:
        store = ItemStore.seeded() if settings.seed_demo_items else ItemStore()
        st.session_state[STORE_KEY] = store
        logger.info("Created item store with %d items", len(store))
    return st.session_state[STORE_KEY]


def _resolve_rules(settings: Settings) -> tuple[CategoryRule, ...]:
    if settings.rules_path is None:
        return DEFAULT_RULES

    try:
        rules = load_category_rules(settings.rules_path)
    except RuleConfigError as exc:
        logger.error("Falling back to default category rules: %s", exc)
        st.error(f"無法載入分類規則，改用預設規則：{exc}")
        return DEFAULT_RULES

    logger.info("Loaded %d category rules from %s", len(rules), settings.rules_path)
    return rules


def main() -> None:
    """Application entrypoint for the BudgetLens dashboard."""

    settings = get_settings()
    setup_logging(settings)

    st.set_page_config(
        page_title=settings.app_title,
        page_icon="📈",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    inject_css()
    valid_pages = [link.slug for link in NAV_LINKS]
    active_page = determine_active_page(valid_pages)
    render_navbar(settings.app_title, active_page)

    store = _get_store(settings)
    rules = _resolve_rules(settings)
    data = prepare_dashboard_data(store.items, rules)

    if active_page == "categories":
        render_categories_page(data, rules, settings)
    else:
        render_overview_page(data, store, settings)


if __name__ == "__main__":
    main()

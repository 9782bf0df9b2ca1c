"""Category rules and per-category summary page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from analytics.categorisation import DEFAULT_CATEGORY, CategoryRule
from app.layout import card
from config import Settings
from core import DashboardData


def _rules_frame(rules: tuple[CategoryRule, ...]) -> pd.DataFrame:
    rows = [{"類別": rule.name, "關鍵字": "、".join(rule.keywords)} for rule in rules]
    rows.append({"類別": DEFAULT_CATEGORY, "關鍵字": "（未符合任何關鍵字）"})
    return pd.DataFrame(rows)


def render_page(data: DashboardData, rules: tuple[CategoryRule, ...], settings: Settings) -> None:
    """Render the rule table and the category summary table."""

    with card("分類規則", suffix="依序比對"):
        st.caption("項目名稱依下列順序比對關鍵字（不分大小寫），採用第一個符合的類別。")
        st.dataframe(_rules_frame(rules), hide_index=True)

    with card("類別統計"):
        category_df = data["category_df"]
        if category_df.empty:
            st.info("目前尚無分析數據。")
            return

        symbol = settings.currency_symbol
        display_df = category_df.assign(Share=category_df["Share"] * 100)
        st.dataframe(
            display_df,
            hide_index=True,
            column_config={
                "Category": st.column_config.TextColumn("類別"),
                "Spend": st.column_config.NumberColumn("實際支出", format=f"{symbol}%.0f"),
                "Budget": st.column_config.NumberColumn("預算額度", format=f"{symbol}%.0f"),
                "Percentage": st.column_config.NumberColumn("使用百分比", format="%.2f%%"),
                "Share": st.column_config.ProgressColumn(
                    "支出佔比", format="%.1f%%", min_value=0.0, max_value=100.0
                ),
            },
        )


__all__ = ["render_page"]

"""Overview dashboard page layout."""

from __future__ import annotations

import html

import streamlit as st

from analytics.budget import OVER_BUDGET
from app.layout import card
from config import Settings, get_logger
from core import DashboardData, ItemStore, Totals, build_csv, export_filename
from core.formatting import STATUS_LABELS, format_amount, format_overall, format_percentage
from visualization import build_budget_chart, build_category_chart

logger = get_logger("overview")

FORM_KEYS = ("new_item_name", "new_item_spend", "new_item_budget")


def _handle_add(store: ItemStore) -> None:
    name, spend, budget = (st.session_state.get(key) for key in FORM_KEYS)
    store.add(name, spend, budget)


def _handle_remove(store: ItemStore, item_id: int) -> None:
    store.remove(item_id)


def _handle_clear(store: ItemStore) -> None:
    store.clear()


def _render_header_metrics(totals: Totals, settings: Settings) -> None:
    metric_cols = st.columns(2)
    metric_cols[0].metric("總預算", format_amount(totals.total_budget, settings.currency_symbol))

    rate = totals.overall_percentage
    css_class = "is-over" if rate is not None and rate > 100 else "is-ok"
    with metric_cols[1]:
        st.caption("目前執行率")
        st.markdown(
            f"<h3 class='bl-rate {css_class}'>{format_overall(rate)}</h3>",
            unsafe_allow_html=True,
        )


def _render_add_form(store: ItemStore) -> None:
    with st.form("add-item", clear_on_submit=True, border=False):
        st.text_input("項目名稱", placeholder="例如：Google 廣告", key=FORM_KEYS[0])
        amount_cols = st.columns(2)
        amount_cols[0].text_input("支出金額", placeholder="金額", key=FORM_KEYS[1])
        amount_cols[1].text_input("預算額度", placeholder="預算", key=FORM_KEYS[2])
        st.form_submit_button(
            "加入分析",
            type="primary",
            on_click=_handle_add,
            args=(store,),
        )


def _render_item_table(data: DashboardData, store: ItemStore, settings: Settings) -> None:
    item_df = data["item_df"]
    if item_df.empty:
        st.markdown(
            "<div class='bl-empty'>目前尚無分析數據，請從左側新增項目。</div>",
            unsafe_allow_html=True,
        )
        return

    widths = (3, 2, 2, 2, 3, 1)
    header_cols = st.columns(widths)
    for col, label in zip(header_cols, ("項目名稱", "自動分類", "支出金額", "預算額度", "使用百分比", "操作")):
        col.caption(label)

    for item in item_df.itertuples(index=False):
        item_id = int(item.id)
        row = st.columns(widths, vertical_alignment="center")
        # plain text: names may contain markdown or LaTeX markers such as $
        row[0].text(item.name)
        row[1].markdown(f"<span class='bl-chip'>{html.escape(item.category)}</span>", unsafe_allow_html=True)
        row[2].write(format_amount(item.spend, settings.currency_symbol))
        row[3].write(format_amount(item.budget, settings.currency_symbol))
        with row[4]:
            label = format_percentage(item.percentage)
            if item.status in STATUS_LABELS:
                label = f"{label} · {STATUS_LABELS[item.status]}"
            if item.status == OVER_BUDGET:
                label = f":red[{label}]"
            st.progress(min(max(item.percentage, 0.0), 100.0) / 100, text=label)
        row[5].button(
            "🗑️",
            key=f"delete-{item_id}",
            help="刪除此項目",
            on_click=_handle_remove,
            args=(store, item_id),
        )


def _render_table_actions(data: DashboardData, store: ItemStore, settings: Settings) -> None:
    csv_text = build_csv(data["analyzed"])
    action_cols = st.columns(2)
    action_cols[0].download_button(
        "下載報表 (CSV)",
        data=(csv_text or "").encode("utf-8"),
        file_name=export_filename(settings.export_prefix),
        mime="text/csv",
        disabled=csv_text is None,
        on_click="ignore",
    )
    action_cols[1].button(
        "清除全部項目",
        key="clear-items",
        disabled=not len(store),
        on_click=_handle_clear,
        args=(store,),
    )


def render_page(data: DashboardData, store: ItemStore, settings: Settings) -> None:
    """Render the overview dashboard page."""

    _render_header_metrics(data["totals"], settings)

    form_col, charts_col = st.columns([1, 2], gap="medium")
    with form_col:
        with card("新增分析項目"):
            _render_add_form(store)

    with charts_col:
        pie_col, bar_col = st.columns(2, gap="medium")
        with pie_col:
            with card("支出類別佔比"):
                chart = build_category_chart(data["category_df"], settings.currency_symbol)
                st.plotly_chart(chart, key="category-donut")
        with bar_col:
            with card("預算與實際對比"):
                chart = build_budget_chart(data["category_df"], settings.currency_symbol)
                st.plotly_chart(chart, key="budget-bars")

    with card("分析項目明細", suffix=f"{len(data['analyzed'])} 項"):
        _render_table_actions(data, store, settings)
        _render_item_table(data, store, settings)

    logger.debug("Rendered overview with %d items", len(data["analyzed"]))


__all__ = ["render_page"]

"""Tests for the Plotly chart builders."""

from __future__ import annotations

from analytics.budget import aggregate, analyze, build_category_frame
from visualization import build_budget_chart, build_category_chart, theme_tokens


def _category_frame(store):
    return build_category_frame(aggregate(analyze(store.items)))


def test_category_chart_keeps_first_seen_order(seeded_store):
    category_df = _category_frame(seeded_store)

    fig = build_category_chart(category_df)

    pie = fig.data[0]
    assert list(pie.labels) == list(category_df["Category"])
    assert list(pie.values) == list(category_df["Spend"])
    assert pie.hole == 0.6
    assert pie.sort is False


def test_category_chart_empty_frame_shows_placeholder():
    fig = build_category_chart(build_category_frame([]))

    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == "尚無支出資料"


def test_budget_chart_has_spend_and_budget_bars(seeded_store):
    category_df = _category_frame(seeded_store)

    fig = build_budget_chart(category_df, currency_symbol="NT$")

    assert [trace.name for trace in fig.data] == ["實際支出", "預算額度"]
    assert list(fig.data[0].y) == list(category_df["Spend"])
    assert list(fig.data[1].y) == list(category_df["Budget"])
    assert fig.data[0].marker.color == theme_tokens().spend_color
    assert fig.data[1].marker.color == theme_tokens().budget_color
    assert "NT$" in fig.data[0].hovertemplate
    assert fig.layout.barmode == "group"


def test_budget_chart_empty_frame_shows_placeholder():
    fig = build_budget_chart(build_category_frame([]))

    assert len(fig.data) == 0

"""Plotly chart builders for the BudgetLens dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_budget_chart",
    "build_category_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _palette_for(count: int) -> list[str]:
    palette = list(TOKENS.category_palette)
    repeats = (count // len(palette)) + 1
    return (palette * repeats)[:count]


def build_category_chart(category_df: pd.DataFrame, currency_symbol: str = "$") -> go.Figure:
    """Render a donut chart of spend share per category.

    Slices keep the first-seen category order of ``category_df`` so colours
    stay stable while items are added.
    """

    if category_df.empty or float(category_df["Spend"].sum()) <= 0:
        return _empty_plotly_figure("尚無支出資料")

    data = category_df.reset_index(drop=True)
    fig = px.pie(
        data,
        names="Category",
        values="Spend",
        hole=0.6,
        color="Category",
        color_discrete_sequence=_palette_for(len(data)),
    )

    fig.update_traces(
        sort=False,
        textposition="inside",
        texttemplate="%{percent:.1%}",
        customdata=data[["Budget", "Percentage"]],
        hovertemplate=(
            "%{label}<br>"
            f"支出: {currency_symbol}%{{value:,.0f}}<br>"
            f"預算: {currency_symbol}%{{customdata[0]:,.0f}}<br>"
            "使用率: %{customdata[1]:.2f}%<extra></extra>"
        ),
        marker=dict(line=dict(color=TOKENS.neutral_white, width=4)),
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=10, b=0),
        legend=dict(
            title="",
            orientation="h",
            yanchor="top",
            y=-0.05,
            xanchor="center",
            x=0.5,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig


def build_budget_chart(category_df: pd.DataFrame, currency_symbol: str = "$") -> go.Figure:
    """Render grouped bars comparing actual spend with budget per category."""

    if category_df.empty:
        return _empty_plotly_figure("尚無預算資料")

    hover_template = f"%{{x}}<br>%{{fullData.name}}: {currency_symbol}%{{y:,.0f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=category_df["Category"],
            y=category_df["Spend"],
            name="實際支出",
            marker=dict(color=TOKENS.spend_color, cornerradius=4),
            hovertemplate=hover_template,
        )
    )
    fig.add_trace(
        go.Bar(
            x=category_df["Category"],
            y=category_df["Budget"],
            name="預算額度",
            marker=dict(color=TOKENS.budget_color, cornerradius=4),
            hovertemplate=hover_template,
        )
    )

    fig.update_layout(
        barmode="group",
        bargap=0.35,
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(
            showgrid=False,
            tickfont=dict(color=TOKENS.label_color, size=TOKENS.label_size),
        ),
        yaxis=dict(
            showgrid=True,
            gridcolor=TOKENS.grid_color,
            zeroline=False,
            tickfont=dict(color=TOKENS.label_color, size=TOKENS.label_size),
        ),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig

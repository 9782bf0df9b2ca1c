"""Shared Plotly theme tokens for BudgetLens visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#94A3B8"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "#F1F5F9"
    spend_color: str = "#3B82F6"
    budget_color: str = "#E2E8F0"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    category_palette: tuple[str, ...] = (
        "#3B82F6",
        "#10B981",
        "#F59E0B",
        "#EF4444",
        "#8B5CF6",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS

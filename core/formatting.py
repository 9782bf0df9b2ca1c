"""Formatting helpers for BudgetLens metrics and tables."""

from __future__ import annotations

from typing import Optional

from analytics.budget import NEAR_LIMIT, ON_BUDGET, OVER_BUDGET

__all__ = ["STATUS_LABELS", "format_amount", "format_overall", "format_percentage"]

STATUS_LABELS = {
    OVER_BUDGET: "⚠️ 超出預算",
    ON_BUDGET: "✅ 剛好達標",
    NEAR_LIMIT: "接近上限",
}


def format_amount(value: float, currency_symbol: str = "$") -> str:
    if float(value).is_integer():
        return f"{currency_symbol}{value:,.0f}"
    return f"{currency_symbol}{value:,.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".") + "%"


def format_overall(percentage: Optional[float]) -> str:
    """Format the overall execution rate; an undefined rate renders as a dash."""

    if percentage is None:
        return "—"
    return f"{percentage:.1f}%"

"""Core logic for assembling BudgetLens dashboard data."""

from __future__ import annotations

from typing import Iterable

from analytics.budget import (
    aggregate,
    analyze,
    build_category_frame,
    build_item_frame,
    compute_totals,
)
from analytics.categorisation import DEFAULT_RULES, CategoryRule
from core.models import DashboardData, Item

__all__ = ["prepare_dashboard_data"]


def prepare_dashboard_data(
    items: Iterable[Item],
    rules: tuple[CategoryRule, ...] = DEFAULT_RULES,
) -> DashboardData:
    """Run the full analysis pipeline over the current item list.

    Nothing is cached between calls; every store change recomputes the
    analysed rows, category summaries and totals from scratch.
    """

    analyzed = analyze(items, rules)
    summaries = aggregate(analyzed)
    totals = compute_totals(analyzed)

    return {
        "analyzed": analyzed,
        "summaries": summaries,
        "totals": totals,
        "item_df": build_item_frame(analyzed),
        "category_df": build_category_frame(summaries),
    }

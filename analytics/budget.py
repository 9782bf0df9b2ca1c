"""Budget analysis: per-item usage, category aggregation and totals."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from analytics.categorisation import DEFAULT_RULES, CategoryRule, classify
from core.models import AnalyzedItem, CategorySummary, Item, Totals

__all__ = [
    "OVER_BUDGET",
    "ON_BUDGET",
    "NEAR_LIMIT",
    "WITHIN_BUDGET",
    "usage_percentage",
    "usage_status",
    "analyze",
    "aggregate",
    "compute_totals",
    "build_item_frame",
    "build_category_frame",
]

OVER_BUDGET = "over_budget"
ON_BUDGET = "on_budget"
NEAR_LIMIT = "near_limit"
WITHIN_BUDGET = "within_budget"

NEAR_LIMIT_THRESHOLD = 85.0

ITEM_COLUMNS = ["id", "name", "category", "spend", "budget", "percentage", "status"]
CATEGORY_COLUMNS = ["Category", "Spend", "Budget", "Percentage", "Share"]


def usage_percentage(spend: float, budget: float) -> float:
    """Return ``spend`` as a percentage of ``budget`` rounded to 2 decimals.

    A zero or negative budget yields 0. Values above 100 are kept as-is.
    """

    if budget > 0:
        return round(spend / budget * 100, 2)
    return 0.0


def usage_status(percentage: float) -> str:
    """Classify a usage percentage into a budget status label."""

    if percentage > 100:
        return OVER_BUDGET
    if percentage == 100:
        return ON_BUDGET
    if percentage > NEAR_LIMIT_THRESHOLD:
        return NEAR_LIMIT
    return WITHIN_BUDGET


def analyze(
    items: Iterable[Item],
    rules: tuple[CategoryRule, ...] = DEFAULT_RULES,
) -> list[AnalyzedItem]:
    """Classify every item and attach its usage percentage, preserving order."""

    return [
        AnalyzedItem(
            id=item.id,
            name=item.name,
            spend=item.spend,
            budget=item.budget,
            category=classify(item.name, rules),
            percentage=usage_percentage(item.spend, item.budget),
        )
        for item in items
    ]


def aggregate(analyzed: Iterable[AnalyzedItem]) -> list[CategorySummary]:
    """Sum spend and budget per category in first-seen category order."""

    totals: dict[str, list[float]] = {}
    for item in analyzed:
        bucket = totals.setdefault(item.category, [0.0, 0.0])
        bucket[0] += item.spend
        bucket[1] += item.budget

    return [CategorySummary(name, spend, budget) for name, (spend, budget) in totals.items()]


def compute_totals(analyzed: Sequence[AnalyzedItem]) -> Totals:
    """Return overall spend, budget and execution rate.

    The overall percentage is ``None`` when the total budget is not positive.
    """

    total_spend = float(sum(item.spend for item in analyzed))
    total_budget = float(sum(item.budget for item in analyzed))
    overall = total_spend / total_budget * 100 if total_budget > 0 else None
    return Totals(total_spend=total_spend, total_budget=total_budget, overall_percentage=overall)


def build_item_frame(analyzed: Sequence[AnalyzedItem]) -> pd.DataFrame:
    """Return a DataFrame of analysed items for tables and charts."""

    if not analyzed:
        return pd.DataFrame(columns=ITEM_COLUMNS)

    frame = pd.DataFrame(
        [
            {
                "id": item.id,
                "name": item.name,
                "category": item.category,
                "spend": float(item.spend),
                "budget": float(item.budget),
                "percentage": float(item.percentage),
            }
            for item in analyzed
        ]
    )
    frame["status"] = frame["percentage"].map(usage_status)
    return frame[ITEM_COLUMNS]


def build_category_frame(summaries: Sequence[CategorySummary]) -> pd.DataFrame:
    """Return per-category spend, budget, usage and share of total spend."""

    if not summaries:
        return pd.DataFrame(columns=CATEGORY_COLUMNS)

    frame = pd.DataFrame(
        {
            "Category": [summary.name for summary in summaries],
            "Spend": [float(summary.spend) for summary in summaries],
            "Budget": [float(summary.budget) for summary in summaries],
        }
    )

    spend = frame["Spend"].to_numpy(dtype=float)
    budget = frame["Budget"].to_numpy(dtype=float)
    ratio = np.divide(spend, budget, out=np.zeros_like(spend), where=budget > 0)
    frame["Percentage"] = np.round(ratio * 100, 2)

    total_spend = float(spend.sum())
    if total_spend > 0:
        frame["Share"] = spend / total_spend
    else:
        frame["Share"] = 0.0

    return frame[CATEGORY_COLUMNS]

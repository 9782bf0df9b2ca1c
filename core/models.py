"""Shared data model definitions for the BudgetLens dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypedDict

import pandas as pd


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    spend: float
    budget: float


@dataclass(frozen=True)
class AnalyzedItem:
    """An :class:`Item` enriched with its category and usage percentage."""

    id: int
    name: str
    spend: float
    budget: float
    category: str
    percentage: float


@dataclass(frozen=True)
class CategorySummary:
    name: str
    spend: float
    budget: float


@dataclass(frozen=True)
class Totals:
    total_spend: float
    total_budget: float
    # None when the total budget is zero or negative
    overall_percentage: Optional[float]


class DashboardData(TypedDict):
    analyzed: list[AnalyzedItem]
    summaries: list[CategorySummary]
    totals: Totals
    item_df: pd.DataFrame
    category_df: pd.DataFrame


__all__ = [
    "Item",
    "AnalyzedItem",
    "CategorySummary",
    "Totals",
    "DashboardData",
]

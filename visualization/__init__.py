"""Visualization utilities for BudgetLens dashboards."""

from .charts import build_budget_chart, build_category_chart
from .theme import theme_tokens

__all__ = [
    "build_budget_chart",
    "build_category_chart",
    "theme_tokens",
]

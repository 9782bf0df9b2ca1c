"""Analytics helpers shared across BudgetLens services."""

from analytics.budget import (
    NEAR_LIMIT,
    ON_BUDGET,
    OVER_BUDGET,
    WITHIN_BUDGET,
    aggregate,
    analyze,
    build_category_frame,
    build_item_frame,
    compute_totals,
    usage_percentage,
    usage_status,
)
from analytics.categorisation import (
    DEFAULT_CATEGORY,
    DEFAULT_RULES,
    CategoryRule,
    RuleConfigError,
    classify,
    load_category_rules,
)

__all__ = [
    "CategoryRule",
    "DEFAULT_CATEGORY",
    "DEFAULT_RULES",
    "RuleConfigError",
    "classify",
    "load_category_rules",
    "NEAR_LIMIT",
    "ON_BUDGET",
    "OVER_BUDGET",
    "WITHIN_BUDGET",
    "aggregate",
    "analyze",
    "build_category_frame",
    "build_item_frame",
    "compute_totals",
    "usage_percentage",
    "usage_status",
]

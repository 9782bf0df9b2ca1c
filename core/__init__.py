"""Core domain package for the BudgetLens application."""

from .export import build_csv, export_filename
from .models import AnalyzedItem, CategorySummary, DashboardData, Item, Totals
from .store import SEED_ITEMS, ItemStore, parse_amount

__all__ = [
    "AnalyzedItem",
    "CategorySummary",
    "DashboardData",
    "Item",
    "ItemStore",
    "SEED_ITEMS",
    "Totals",
    "build_csv",
    "export_filename",
    "parse_amount",
]

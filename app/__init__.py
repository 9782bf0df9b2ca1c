"""Streamlit application package for BudgetLens."""

from .main import main

__all__ = ["main"]

"""Page modules for the BudgetLens Streamlit application."""

from .categories import render_page as render_categories_page
from .overview import render_page as render_overview_page

__all__ = [
    "render_categories_page",
    "render_overview_page",
]

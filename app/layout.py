"""Shared layout primitives for the BudgetLens Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

import streamlit as st
from streamlit.components.v1 import html as components_html


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("overview", "總覽"),
    NavigationLink("categories", "分類規則"),
)


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 16px;
            --card-bg: #FFFFFF;
            --border: #E2E8F0;
            --shadow: 0 1px 2px rgba(15, 23, 42, 0.05);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F8FAFC;
          }

          .block-container {
            max-width: 1280px;
            padding-top: 2rem;
            padding-bottom: 4rem;
          }

          .bl-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .bl-nav__brand {
            font-size: 1.6rem;
            font-weight: 700;
            color: #1E293B;
          }

          .bl-nav__subtitle {
            font-size: 0.9rem;
            font-weight: 400;
            color: #64748B;
          }

          .bl-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .bl-nav__link,
          .bl-nav__link:visited {
            position: relative;
            font-weight: 600;
            color: #64748B;
            text-decoration: none;
          }

          .bl-nav__link.is-active {
            color: #2563EB;
          }

          .bl-nav__link.is-active::after {
            content: "";
            position: absolute;
            left: 0;
            right: 0;
            bottom: -8px;
            height: 3px;
            border-radius: 999px;
            background: #2563EB;
          }

          .bl-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .bl-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 20px;
            margin-bottom: var(--gap);
          }

          .bl-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #1E293B;
          }

          .bl-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 6px;
            background: #F1F5F9;
            color: #475569;
            white-space: nowrap;
          }

          .bl-rate.is-over {
            color: #EF4444;
          }

          .bl-rate.is-ok {
            color: #10B981;
          }

          .bl-empty {
            padding: 3rem 0;
            text-align: center;
            color: #94A3B8;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable BudgetLens card."""

    chip_html = f'<span class="bl-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="bl-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="bl-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(title: str, active_page: str) -> None:
    """Render the dashboard title bar and page links."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "bl-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'
        link_markup.append(
            f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
        )

    st.markdown(
        f"""
        <nav class="bl-nav">
            <div class="bl-nav__brand">📈 {title}
                <div class="bl-nav__subtitle">自動分類、預算追蹤與數據視覺化</div>
            </div>
            <div class="bl-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )
    _enforce_same_tab_navigation()


def _enforce_same_tab_navigation() -> None:
    """Ensure navigation links stay within the same browser tab."""

    components_html(
        """
        <script>
        (function() {
          if (window.parent && !window.parent.__blNavSameTab) {
            window.parent.__blNavSameTab = true;
            const enforce = () => {
              const anchors = window.parent.document.querySelectorAll('a.bl-nav__link');
              anchors.forEach((anchor) => {
                if (anchor.target && anchor.target.toLowerCase() !== '_self') {
                  anchor.target = '_self';
                }
              });
            };
            enforce();
            const observer = new MutationObserver(enforce);
            observer.observe(window.parent.document.body, { childList: true, subtree: true });
          }
        })();
        </script>
        """,
        height=0,
        width=0,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "overview")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "overview"

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    if params.get("page") != page:
        st.query_params["page"] = page

    return page


__all__ = [
    "NavigationLink",
    "NAV_LINKS",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
]

"""Keyword-based category rules and the item classifier."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

__all__ = [
    "CategoryRule",
    "DEFAULT_CATEGORY",
    "DEFAULT_RULES",
    "RuleConfigError",
    "classify",
    "load_category_rules",
]

DEFAULT_CATEGORY = "其他"


class RuleConfigError(ValueError):
    """Raised when a category rules file cannot be used."""


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: tuple[str, ...]


DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("行銷推廣", ("廣告", "FB", "Google", "行銷", "推廣", "SEO", "展覽")),
    CategoryRule("營運成本", ("租金", "水電", "文具", "維護", "清潔", "辦公室", "保險")),
    CategoryRule("人力資源", ("薪資", "獎金", "勞健保", "午餐", "培訓", "福利", "差旅")),
    CategoryRule("資訊技術", ("伺服器", "雲端", "AWS", "軟體", "授權", "IT", "電腦", "網域")),
)


@lru_cache(maxsize=512)
def classify(name: str, rules: tuple[CategoryRule, ...] = DEFAULT_RULES) -> str:
    """Return the first category whose keywords occur in ``name``.

    Rules are tested in declaration order and keywords match as
    case-insensitive substrings. Names matching no rule, including the empty
    string, fall back to :data:`DEFAULT_CATEGORY`.
    """

    if not name:
        return DEFAULT_CATEGORY

    folded = name.casefold()
    for rule in rules:
        if any(keyword.casefold() in folded for keyword in rule.keywords):
            return rule.name
    return DEFAULT_CATEGORY


def load_category_rules(path: str | Path) -> tuple[CategoryRule, ...]:
    """Read an ordered rule table from the ``[categories]`` table of a TOML file.

    Parameters
    ----------
    path:
        TOML file mapping each category name to a list of keywords.

    Returns
    -------
    tuple[CategoryRule, ...]
        Rules in the order they are declared in the file.
    """

    path = Path(path)
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except FileNotFoundError as exc:
        raise RuleConfigError(f"Rules file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise RuleConfigError(f"Rules file is not valid TOML: {path} ({exc})") from exc

    table = data.get("categories")
    if not isinstance(table, dict) or not table:
        raise RuleConfigError(f"Rules file has no [categories] table: {path}")

    rules: list[CategoryRule] = []
    for category, keywords in table.items():
        if isinstance(keywords, str):
            keywords = [keywords]
        if not isinstance(keywords, list) or not all(isinstance(kw, str) for kw in keywords):
            raise RuleConfigError(f"Keywords for {category!r} must be a list of strings")
        cleaned = tuple(kw.strip() for kw in keywords if kw.strip())
        if not cleaned:
            raise RuleConfigError(f"Category {category!r} has no keywords")
        rules.append(CategoryRule(str(category), cleaned))

    return tuple(rules)

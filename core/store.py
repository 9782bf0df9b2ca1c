"""In-memory item store owning the dashboard's list of expense items."""

from __future__ import annotations

import itertools
import math
from typing import Any, Iterable, Iterator, Optional

from config.logger import get_logger
from core.models import Item

__all__ = ["ItemStore", "SEED_ITEMS", "parse_amount"]

logger = get_logger("store")

SEED_ITEMS: tuple[tuple[str, float, float], ...] = (
    ("辦公室租金", 50000, 50000),
    ("AWS 雲端伺服器", 12500, 15000),
    ("Facebook 廣告投放", 32000, 30000),
    ("員工午餐補助", 6800, 8000),
    ("辦公室文具", 1500, 1000),
    ("專業責任保險", 15000, 15000),
    ("Google 關鍵字", 18000, 25000),
)


def parse_amount(raw: Any) -> Optional[float]:
    """Parse a form value into a finite float, or ``None`` when unusable."""

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class ItemStore:
    """Owns the item list; every other view is derived from :attr:`items`.

    Mutations are synchronous. Invalid input is skipped rather than raised so
    that a half-filled form never leaves a partial item behind.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: list[Item] = list(items)
        start = max((item.id for item in self._items), default=0) + 1
        self._ids = itertools.count(start)

    @classmethod
    def seeded(cls) -> "ItemStore":
        store = cls()
        for name, spend, budget in SEED_ITEMS:
            store.add(name, spend, budget)
        return store

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def add(self, name: Any, spend: Any, budget: Any) -> Optional[Item]:
        """Append a new item, returning it, or ``None`` if any field is invalid."""

        clean_name = name.strip() if isinstance(name, str) else ""
        spend_value = parse_amount(spend)
        budget_value = parse_amount(budget)

        if not clean_name or spend_value is None or budget_value is None:
            logger.debug("Skipped item with missing or unparseable fields: %r", name)
            return None
        if spend_value < 0:
            logger.debug("Skipped item %r with negative spend %s", clean_name, spend_value)
            return None

        item = Item(id=next(self._ids), name=clean_name, spend=spend_value, budget=budget_value)
        self._items.append(item)
        logger.info("Added item %d (%s)", item.id, item.name)
        return item

    def remove(self, item_id: int) -> bool:
        """Delete the item with ``item_id``; unknown ids are ignored."""

        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                logger.info("Removed item %d (%s)", item.id, item.name)
                return True
        return False

    def clear(self) -> None:
        self._items.clear()
        logger.info("Cleared all items")

"""CSV export of analysed budget items."""

from __future__ import annotations

import csv
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from core.models import AnalyzedItem

__all__ = ["BOM", "EXPORT_HEADERS", "build_csv", "export_filename", "format_number"]

BOM = "\ufeff"
EXPORT_HEADERS = ["項目名稱", "類別", "支出金額", "預算額度", "使用百分比(%)"]


def format_number(value: float) -> str:
    """Render whole numbers without a decimal part (``150.0`` -> ``150``)."""

    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_csv(analyzed: Sequence[AnalyzedItem]) -> Optional[str]:
    """Serialise analysed items as BOM-prefixed CSV text.

    Returns ``None`` for an empty item list. Names containing commas, quotes
    or newlines are quoted; every other row is written as plain
    comma-joined fields.
    """

    if not analyzed:
        return None

    frame = pd.DataFrame(
        [
            [
                item.name,
                item.category,
                format_number(item.spend),
                format_number(item.budget),
                f"{format_number(item.percentage)}%",
            ]
            for item in analyzed
        ],
        columns=EXPORT_HEADERS,
    )
    body = frame.to_csv(index=False, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    return BOM + body.rstrip("\n")


def export_filename(prefix: str, today: date | None = None) -> str:
    """Return the download filename for an export made on ``today``."""

    today = today or date.today()
    return f"{prefix}_{today.isoformat()}.csv"

"""Section grouping and auto-calculated section totals."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from .models import Row
from .numeral import to_decimal

__all__ = ["group_by_category", "is_total_row", "section_total", "apply_auto_totals"]

_CENTS = Decimal("0.01")


def group_by_category(rows: Iterable[Row]) -> Dict[str, List[Row]]:
    grouped: Dict[str, List[Row]] = {}
    for row in rows:
        grouped.setdefault(row.category, []).append(row)
    return grouped


def is_total_row(row: Row) -> bool:
    return "total" in row.label.lower()


def section_total(rows: Iterable[Row], category: str) -> Decimal:
    """Sum every non-total row of a category; blank or unreadable values count as zero."""
    total = Decimal("0")
    for row in rows:
        if row.category != category or is_total_row(row):
            continue
        amount = to_decimal(row.value)
        if amount is not None:
            total += amount
    return total.quantize(_CENTS)


def apply_auto_totals(rows: Iterable[Row]) -> Tuple[Row, ...]:
    """Return a copy of the rows with each total row carrying its section's computed sum."""
    items = tuple(rows)
    sums = {category: section_total(items, category) for category in group_by_category(items)}
    return tuple(
        row.with_value(str(sums[row.category])) if is_total_row(row) else row
        for row in items
    )

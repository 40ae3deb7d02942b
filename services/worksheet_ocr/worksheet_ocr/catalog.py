"""Canonical worksheet fields and section category handling."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .config import CategoryMode
from .models import Row

__all__ = [
    "FIELD_CATALOG",
    "CLOSED_CATEGORIES",
    "OTHER_CATEGORY",
    "coerce_category",
    "resolve_category",
    "default_template",
]

# Declaration order is the matcher's tie-break order.
FIELD_CATALOG: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "assets": (
        "CASH",
        "ACCOUNTS RECEIVABLE",
        "NOTES RECEIVABLE",
        "INVENTORY",
        "SUPPLIES",
        "PREPAID INSURANCE",
        "PREPAID RENT",
        "EQUIPMENT",
        "ACCUMULATED DEPRECIATION",
        "LAND",
        "BUILDING",
        "TOTAL ASSETS",
    ),
    "liabilities": (
        "ACCOUNTS PAYABLE",
        "NOTES PAYABLE",
        "SALARIES PAYABLE",
        "INTEREST PAYABLE",
        "UNEARNED REVENUE",
        "TOTAL LIABILITIES",
    ),
    "equity": (
        "OWNERS CAPITAL",
        "DRAWINGS",
        "RETAINED EARNINGS",
        "COMMON STOCK",
        "TOTAL EQUITY",
    ),
})

CLOSED_CATEGORIES = ("assets", "liabilities", "equity")
OTHER_CATEGORY = "other"

# Checked in order; the first hit wins.
_CATEGORY_HINTS = (
    ("ASSET", "assets"),
    ("LIABILIT", "liabilities"),
    ("EQUITY", "equity"),
    ("CAPITAL", "equity"),
    ("OWNER", "equity"),
)

_DEFAULT_TEMPLATE = (
    Row(label="ITEM 1", value="", category="SECTION 1", indent_level=0),
    Row(label="ITEM 2", value="", category="SECTION 1", indent_level=0),
    Row(label="ITEM 3", value="", category="SECTION 2", indent_level=0),
)


def coerce_category(name: str) -> str:
    """Fold a free-form section name into assets/liabilities/equity/other."""
    lowered = name.strip().lower()
    if lowered in CLOSED_CATEGORIES or lowered == OTHER_CATEGORY:
        return lowered
    upper = name.upper()
    for hint, category in _CATEGORY_HINTS:
        if hint in upper:
            return category
    return OTHER_CATEGORY


def resolve_category(name: str, mode: CategoryMode) -> str:
    if mode is CategoryMode.CLOSED:
        return coerce_category(name)
    return name


def default_template(mode: CategoryMode = CategoryMode.OPEN) -> Tuple[Row, ...]:
    """Rows handed back when a worksheet yields too little to be trusted."""
    if mode is CategoryMode.OPEN:
        return _DEFAULT_TEMPLATE
    return tuple(
        Row(
            label=row.label,
            value=row.value,
            category=coerce_category(row.category),
            indent_level=row.indent_level,
        )
        for row in _DEFAULT_TEMPLATE
    )

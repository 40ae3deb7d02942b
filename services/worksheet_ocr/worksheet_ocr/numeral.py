"""Helpers for pulling amounts out of worksheet lines."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from .models import ParsedLine

__all__ = [
    "parse_line",
    "has_trailing_value",
    "find_embedded_value",
    "clean_amount",
    "to_decimal",
]

# Optional currency sign, comma-grouped digits, optional fraction; parentheses mark negatives.
_TRAILING_VALUE_PATTERN = re.compile(
    r"(?P<open>\()?\$?\s*(?P<amount>\d+(?:,\d{3})*(?:\.\d+)?)(?P<close>\))?\s*$"
)
_EMBEDDED_VALUE_PATTERN = re.compile(r"(?P<open>\()?(?P<amount>\d+(?:,\d{3})*(?:\.\d+)?)(?P<close>\))?")
_LABEL_TAIL_CHARS = " \t.,:;=|-$("


def clean_amount(raw: str) -> str:
    """Drop thousands separators from a matched amount."""
    return raw.replace(",", "")


def has_trailing_value(line: str) -> bool:
    return _TRAILING_VALUE_PATTERN.search(line) is not None


def parse_line(line: str) -> ParsedLine:
    """
    Split a data line into its label and trailing amount.

    The amount must sit at the very end of the line. Lines without one come back
    whole as the label with an empty value.
    """
    text = line.strip()
    match = _TRAILING_VALUE_PATTERN.search(text)
    if not match:
        return ParsedLine(label=text, value="")

    amount = clean_amount(match.group("amount"))
    if match.group("open") and match.group("close"):
        amount = f"-{amount}"
    label = text[: match.start()].rstrip(_LABEL_TAIL_CHARS)
    return ParsedLine(label=label, value=amount)


def find_embedded_value(line: str) -> str:
    """Return the last amount found anywhere in the line, or an empty string."""
    matches = list(_EMBEDDED_VALUE_PATTERN.finditer(line))
    if not matches:
        return ""
    last = matches[-1]
    amount = clean_amount(last.group("amount"))
    if last.group("open") and last.group("close"):
        amount = f"-{amount}"
    return amount


def to_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Parse a row value into a Decimal; None for blanks and garbage."""
    if value is None:
        return None
    text = clean_amount(value.strip())
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None

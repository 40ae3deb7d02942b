"""Section header detection."""

from __future__ import annotations

import re

from .config import HEADER_CAPS_RATIO, HEADER_MAX_LENGTH
from .numeral import has_trailing_value

__all__ = ["HEADER_KEYWORDS", "is_section_header"]

HEADER_KEYWORDS = (
    "STATEMENT",
    "ASSETS",
    "LIABILITIES",
    "EQUITY",
    "SALES",
    "EXPENSES",
    "PROFIT",
    "REVENUE",
    "INCOME",
    "COST",
    "OWNER",
)

_LEADING_DIGIT = re.compile(r"^\d")
_UPPER_CHAR = re.compile(r"[A-Z]")
# A reporting year closing a title ("Income Statement 2024") is not an amount.
_TRAILING_YEAR = re.compile(r"\s(?:19|20)\d{2}\s*$")


def is_section_header(
    line: str,
    *,
    caps_ratio: float = HEADER_CAPS_RATIO,
    max_length: int = HEADER_MAX_LENGTH,
) -> bool:
    """
    Decide whether a trimmed line names a section rather than carrying a value.

    Headers are short, don't start with a digit, don't end in an amount (a trailing
    reporting year is allowed), and are either mostly capitals (measured against
    the full line length) or contain one of the statement keywords. The keyword check runs on the uppercased line so
    OCR case noise doesn't hide it.
    """
    text = line.strip()
    if not text or _LEADING_DIGIT.match(text):
        return False
    if len(text) >= max_length:
        return False
    if has_trailing_value(text) and not _TRAILING_YEAR.search(text):
        return False

    upper_count = len(_UPPER_CHAR.findall(text))
    if upper_count > len(text) * caps_ratio:
        return True

    upper = text.upper()
    return any(keyword in upper for keyword in HEADER_KEYWORDS)

"""Text cleanup helpers for OCR'd worksheet lines."""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "normalize_text",
    "normalize_label",
    "clean_for_matching",
    "strip_markers",
    "leading_marker_count",
    "is_noise",
]

# Map a few visually-similar punctuation marks to ASCII for stability
PUNCT_MAP = {
    "\u2018": "'", "\u2019": "'", "\u201B": "'",
    "\u201C": '"', "\u201D": '"',
    "\u2013": "-", "\u2014": "-", "\u2212": "-",  # en/em/fraction minus
}

ZERO_WIDTH = {"\u200B", "\u200C", "\u200D", "\uFEFF"}  # ZWSP/ZWNJ/ZWJ/BOM

MARKER_CHARS = " \t-+\u2022*"

_PIPE_PATTERN = re.compile(r"\|")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_NON_ALPHA_PATTERN = re.compile(r"[^A-Z\s]")
_DIGITS_ONLY_PATTERN = re.compile(r"^[\d.\s]+$")
_SYMBOLS_ONLY_PATTERN = re.compile(r"^[^\w\s]+$")


def normalize_text(text: str) -> str:
    """Unicode-normalize OCR output and map odd punctuation to ASCII."""
    t = unicodedata.normalize("NFKC", text)
    for z in ZERO_WIDTH:
        t = t.replace(z, "")
    return "".join(PUNCT_MAP.get(ch, ch) for ch in t)


def normalize_label(text: str) -> str:
    """Drop pipes (misread column rules), squeeze whitespace, trim and uppercase."""
    if not text:
        return ""
    label = _PIPE_PATTERN.sub("", text)
    label = _WHITESPACE_PATTERN.sub(" ", label)
    return label.strip().upper()


def clean_for_matching(text: str) -> str:
    """Uppercase and keep only letters and spaces."""
    cleaned = _NON_ALPHA_PATTERN.sub("", text.upper())
    return " ".join(cleaned.split())


def strip_markers(text: str) -> str:
    """Remove leading bullet/indent markers from a line."""
    return text.lstrip(MARKER_CHARS)


def leading_marker_count(text: str) -> int:
    return len(text) - len(strip_markers(text))


def is_noise(line: str, min_length: int) -> bool:
    """True for lines too short, only digits/dots, or only symbols."""
    if len(line) < min_length:
        return True
    if _DIGITS_ONLY_PATTERN.match(line):
        return True
    return bool(_SYMBOLS_ONLY_PATTERN.match(line))

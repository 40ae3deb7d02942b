"""Parser configuration: heuristic thresholds, strictness profiles and env loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class CategoryMode(str, Enum):
    """How section categories are named on emitted rows."""

    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_name(cls, name: str) -> "CategoryMode":
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown category mode '{name}' (expected one of: {choices})") from exc


FUZZY_MATCH_THRESHOLD = 60
HEADER_CAPS_RATIO = 0.5
HEADER_MAX_LENGTH = 50
INDENT_WIDTH = 2
DEFAULT_CATEGORY = "Uncategorized"


@dataclass(slots=True, frozen=True)
class ParserConfig:
    fuzzy_threshold: int = FUZZY_MATCH_THRESHOLD
    caps_ratio: float = HEADER_CAPS_RATIO
    header_max_length: int = HEADER_MAX_LENGTH
    min_line_length: int = 3
    min_rows: int = 3
    indent_width: int = INDENT_WIDTH
    category_mode: CategoryMode = CategoryMode.OPEN
    default_category: str = DEFAULT_CATEGORY
    log_level: str = "INFO"

    def with_overrides(self, **changes) -> "ParserConfig":
        return replace(self, **changes)


# Fuzzy-matching revision: three-character noise floor, fall back below three rows.
STRICT = ParserConfig(min_line_length=3, min_rows=3)
# Positional-only revision: two-character noise floor, fall back only when nothing parsed.
LENIENT = ParserConfig(min_line_length=2, min_rows=1)

PROFILES = {
    "strict": STRICT,
    "lenient": LENIENT,
}


def get_profile(name: str) -> ParserConfig:
    try:
        return PROFILES[name.strip().lower()]
    except KeyError as exc:
        choices = ", ".join(sorted(PROFILES))
        raise ValueError(f"Unknown profile '{name}' (expected one of: {choices})") from exc


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def _get_float(key: str, default: float) -> float:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a number") from exc


def load_config() -> ParserConfig:
    """Build a config from WORKSHEET_* environment variables on top of a named profile."""
    base = get_profile(_get_env("WORKSHEET_PROFILE", "strict"))

    category_mode = CategoryMode.from_name(_get_env("WORKSHEET_CATEGORY_MODE", base.category_mode.value))
    fuzzy_threshold = _get_int("WORKSHEET_FUZZY_THRESHOLD", base.fuzzy_threshold)
    if not 0 <= fuzzy_threshold <= 100:
        raise ValueError("Environment variable WORKSHEET_FUZZY_THRESHOLD must be between 0 and 100")
    caps_ratio = _get_float("WORKSHEET_CAPS_RATIO", base.caps_ratio)
    header_max_length = max(1, _get_int("WORKSHEET_HEADER_MAX_LENGTH", base.header_max_length))
    min_line_length = max(1, _get_int("WORKSHEET_MIN_LINE_LENGTH", base.min_line_length))
    min_rows = max(0, _get_int("WORKSHEET_MIN_ROWS", base.min_rows))
    log_level = _get_env("LOG_LEVEL", base.log_level).upper()

    return base.with_overrides(
        category_mode=category_mode,
        fuzzy_threshold=fuzzy_threshold,
        caps_ratio=caps_ratio,
        header_max_length=header_max_length,
        min_line_length=min_line_length,
        min_rows=min_rows,
        log_level=log_level,
    )

"""Fuzzy matching of noisy OCR lines against the canonical field catalog."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from fuzzywuzzy import fuzz, process

from .catalog import FIELD_CATALOG
from .config import FUZZY_MATCH_THRESHOLD
from .labels import clean_for_matching
from .logging import get_logger
from .models import Match

__all__ = ["match_field", "best_catalog_match"]

logger = get_logger(__name__)


def best_catalog_match(
    cleaned: str,
    catalog: Mapping[str, Sequence[str]] = FIELD_CATALOG,
) -> Optional[Match]:
    """
    Score a cleaned line against every catalog label with token-set similarity.

    Only a strictly higher score replaces the running best, so on ties the
    category declared first in the catalog wins (and, within a category, the
    label listed first).
    """
    best: Optional[Match] = None
    for category, labels in catalog.items():
        if not labels:
            continue
        hit = process.extractOne(cleaned, list(labels), scorer=fuzz.token_set_ratio)
        if not hit:
            continue
        label, score = hit
        if best is None or score > best.score:
            best = Match(label=label, category=category, score=score)
    return best


def match_field(
    line: str,
    catalog: Mapping[str, Sequence[str]] = FIELD_CATALOG,
    threshold: int = FUZZY_MATCH_THRESHOLD,
) -> Optional[Match]:
    """Return the best canonical field for a line, or None when nothing clears the threshold."""
    cleaned = clean_for_matching(line)
    if not cleaned:
        return None

    best = best_catalog_match(cleaned, catalog)
    if best is None or best.score <= threshold:
        logger.debug(
            "field_match_below_threshold",
            line=cleaned,
            score=best.score if best else 0,
            threshold=threshold,
        )
        return None
    return best

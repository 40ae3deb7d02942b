"""Turn raw OCR text of an accounting worksheet into ordered line-item rows."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from .catalog import FIELD_CATALOG, default_template, resolve_category
from .config import STRICT, ParserConfig
from .headers import is_section_header
from .labels import is_noise, leading_marker_count, normalize_label, normalize_text, strip_markers
from .logging import get_logger
from .matcher import match_field
from .models import ParseTrace, Row, SectionState
from .numeral import find_embedded_value, parse_line

__all__ = ["parse", "measure_indent"]

logger = get_logger(__name__)

MIN_LABEL_LENGTH = 2


def measure_indent(raw_line: str, indent_width: int = 2) -> int:
    """Indent depth from leading spaces and bullet markers."""
    return leading_marker_count(raw_line) // max(1, indent_width)


def parse(
    raw_text: str,
    config: Optional[ParserConfig] = None,
    trace: Optional[ParseTrace] = None,
    catalog: Mapping[str, Sequence[str]] = FIELD_CATALOG,
) -> List[Row]:
    """
    Classify each line as noise, section header or data and build rows.

    Data lines are first fuzzy-matched against the catalog; a hit yields a row
    with the canonical label and the catalog's category. Anything else goes
    through the positional parser and inherits the current section. When fewer
    than ``config.min_rows`` rows come out, the default template is returned
    instead.
    """
    cfg = config or STRICT
    mode = cfg.category_mode
    state = SectionState(category=resolve_category(cfg.default_category, mode))
    rows: List[Row] = []

    raw_lines = normalize_text(raw_text or "").splitlines()
    for line_no, raw_line in enumerate(raw_lines, start=1):
        line = raw_line.strip()
        if not line:
            continue

        if is_noise(line, cfg.min_line_length):
            _record(trace, line_no, line, "noise")
            continue

        if is_section_header(line, caps_ratio=cfg.caps_ratio, max_length=cfg.header_max_length):
            state.enter(resolve_category(normalize_label(line), mode))
            _record(trace, line_no, line, "header", category=state.category)
            continue

        indent = measure_indent(raw_line, cfg.indent_width)

        match = match_field(line, catalog=catalog, threshold=cfg.fuzzy_threshold)
        if match is not None:
            row = Row(
                label=match.label,
                value=find_embedded_value(line),
                category=resolve_category(match.category, mode),
                indent_level=indent,
            )
            rows.append(row)
            _record(trace, line_no, line, "fuzzy", label=row.label, category=row.category, score=match.score)
            continue

        parsed = parse_line(strip_markers(line))
        label = normalize_label(parsed.label)
        if len(label) < MIN_LABEL_LENGTH:
            _record(trace, line_no, line, "short_label")
            continue

        state.indent = indent
        row = Row(label=label, value=parsed.value, category=state.category, indent_level=state.indent)
        rows.append(row)
        _record(trace, line_no, line, "positional", label=row.label, category=row.category)

    if len(rows) < cfg.min_rows:
        logger.info(
            "worksheet_fallback_template",
            extracted=len(rows),
            min_rows=cfg.min_rows,
            lines=len(raw_lines),
        )
        if trace is not None:
            trace.record(0, "", "fallback", extracted=len(rows), min_rows=cfg.min_rows)
        return list(default_template(mode))

    logger.info("worksheet_parsed", rows=len(rows), lines=len(raw_lines))
    return rows


def _record(trace: Optional[ParseTrace], line_no: int, line: str, decision: str, **detail) -> None:
    logger.debug("line_classified", line_no=line_no, decision=decision, **detail)
    if trace is not None:
        trace.record(line_no, line, decision, **detail)

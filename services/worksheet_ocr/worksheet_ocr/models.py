"""Domain models for parsed worksheet rows and parse-time state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass(slots=True, frozen=True)
class Row:
    """Single line item extracted from a worksheet."""

    label: str
    value: str = ""
    category: str = ""
    indent_level: int = 0

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("label must not be empty")
        if self.indent_level < 0:
            raise ValueError("indent_level must be non-negative")

    def with_value(self, value: str) -> "Row":
        """Return a copy carrying a different value; the original is left untouched."""
        return replace(self, value=value)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class SectionState:
    """Cursor for the section currently being read."""

    category: str
    indent: int = 0

    def enter(self, category: str) -> None:
        self.category = category
        self.indent = 0


@dataclass(slots=True, frozen=True)
class Match:
    """Best catalog hit for a line."""

    label: str
    category: str
    score: int


@dataclass(slots=True, frozen=True)
class ParsedLine:
    label: str
    value: str = ""


@dataclass(slots=True, frozen=True)
class TraceEvent:
    line_no: int
    text: str
    decision: str
    detail: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ParseTrace:
    """Caller-owned record of how each input line was classified."""

    events: List[TraceEvent] = field(default_factory=list)

    def record(self, line_no: int, text: str, decision: str, **detail: Any) -> None:
        self.events.append(TraceEvent(line_no=line_no, text=text, decision=decision, detail=detail))

    def decisions(self) -> List[str]:
        return [event.decision for event in self.events]

    def last(self) -> Optional[TraceEvent]:
        return self.events[-1] if self.events else None

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [asdict(event) for event in self.events]

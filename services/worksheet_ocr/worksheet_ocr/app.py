"""FastAPI application exposing the worksheet parser."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .config import CategoryMode, ParserConfig, get_profile, load_config
from .logging import configure_logging, get_logger
from .models import ParseTrace
from .parser import parse
from .totals import apply_auto_totals

logger = get_logger(__name__)


class ParseRequest(BaseModel):
    text: str = ""
    profile: Optional[str] = None
    category_mode: Optional[str] = Field(None, alias="categoryMode")
    auto_totals: bool = Field(False, alias="autoTotals")
    trace: bool = False

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


def create_app(config: ParserConfig | None = None) -> FastAPI:
    base_config = config or load_config()
    configure_logging(base_config.log_level)

    api = FastAPI(title="Worksheet OCR Parser", version="1.0.0")

    @api.get("/health")
    def health() -> dict:
        return {
            "status": "healthy",
            "min_rows": base_config.min_rows,
            "category_mode": base_config.category_mode.value,
        }

    @api.post("/parse")
    def parse_worksheet(request: ParseRequest) -> Dict[str, Any]:
        try:
            cfg = get_profile(request.profile) if request.profile else base_config
            if request.category_mode:
                cfg = cfg.with_overrides(category_mode=CategoryMode.from_name(request.category_mode))
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        trace = ParseTrace() if request.trace else None
        rows = parse(request.text, config=cfg, trace=trace)
        if request.auto_totals:
            rows = list(apply_auto_totals(rows))
        logger.info("parse_request_handled", rows=len(rows), profile=request.profile or "default")

        body: Dict[str, Any] = {"rows": [row.to_dict() for row in rows]}
        if trace is not None:
            body["trace"] = trace.as_dicts()
        return body

    return api

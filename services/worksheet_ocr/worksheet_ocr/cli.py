"""Command-line interface for the worksheet parser."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import CategoryMode, ParserConfig, get_profile, load_config
from .logging import configure_logging, get_logger
from .models import ParseTrace
from .parser import parse
from .totals import apply_auto_totals

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Worksheet OCR text parser")


@app.command("parse")
def parse_command(
    source: str = typer.Argument(..., help="Text file with OCR output, or '-' for stdin"),
    profile: Optional[str] = typer.Option(None, "--profile", help="Strictness profile: strict or lenient"),
    categories: Optional[str] = typer.Option(None, "--categories", help="Category mode: open or closed"),
    auto_totals: bool = typer.Option(False, "--auto-totals", help="Replace total rows with computed sums"),
    show_trace: bool = typer.Option(False, "--trace", help="Include per-line classification trace"),
    console_logs: bool = typer.Option(False, "--console-logs", help="Human-readable logs on stderr instead of JSON"),
) -> None:
    config = _build_config(profile, categories)
    configure_logging(config.log_level, json_logs=not console_logs)

    text = _read_source(source)
    trace = ParseTrace() if show_trace else None
    rows = parse(text, config=config, trace=trace)
    if auto_totals:
        rows = list(apply_auto_totals(rows))
    logger.info("parse_command_finished", source=source, rows=len(rows), auto_totals=auto_totals)

    payload: dict = {"rows": [row.to_dict() for row in rows]}
    if trace is not None:
        payload["trace"] = trace.as_dicts()
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("service")
def service_command(
    host: str = typer.Option("0.0.0.0", "--host", help="Service bind host"),
    port: int = typer.Option(8000, "--port", help="Service port"),
) -> None:
    import uvicorn

    uvicorn.run(
        "worksheet_ocr.app:create_app",
        host=host,
        port=port,
        factory=True,
        log_level="info",
    )


def _build_config(profile: Optional[str], categories: Optional[str]) -> ParserConfig:
    try:
        config = get_profile(profile) if profile else load_config()
        if categories:
            config = config.with_overrides(category_mode=CategoryMode.from_name(categories))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {source}")
    return path.read_text(encoding="utf-8")


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

"""Structured line-item extraction from OCR'd accounting worksheets."""

from .models import Row
from .parser import parse

__all__ = ["Row", "parse"]

"""Shared schemas for docmark."""

from docmark.schemas.document import ParseResult
from docmark.schemas.outline import HeadingRecord, OutlineNode

__all__ = ["HeadingRecord", "OutlineNode", "ParseResult"]

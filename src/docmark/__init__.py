"""docmark: render markdown documents into sectioned HTML with an outline."""

from docmark.exceptions import ConfigurationError, DocmarkError, RenderError
from docmark.headings import extract_headings
from docmark.outline import build_outline, build_tree, flatten_outline
from docmark.parser import (
    ParseOptions,
    parse,
    parse_content,
    parse_meta,
    parse_tree,
    remove_markdown,
)
from docmark.schemas import HeadingRecord, OutlineNode, ParseResult
from docmark.transform import transform_content, transform_html

__all__ = [
    "ConfigurationError",
    "DocmarkError",
    "HeadingRecord",
    "OutlineNode",
    "ParseOptions",
    "ParseResult",
    "RenderError",
    "build_outline",
    "build_tree",
    "extract_headings",
    "flatten_outline",
    "parse",
    "parse_content",
    "parse_meta",
    "parse_tree",
    "remove_markdown",
    "transform_content",
    "transform_html",
]

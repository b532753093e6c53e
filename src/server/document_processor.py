"""Run parse requests off the event loop and shape their responses."""

from __future__ import annotations

import asyncio
import time

from docmark.exceptions import DocmarkError
from docmark.outline import count_nodes
from docmark.parser import ParseOptions, parse, remove_markdown
from docmark.utils.logging_config import get_logger
from server.models import ErrorResponse, ParseResponse, ParseSuccessResponse, TextResponse

# Initialize logger for this module
logger = get_logger(__name__)


async def process_parse(content: str, *, math: bool | None = None) -> ParseResponse:
    """Parse a document and return its meta, HTML and outline."""
    started = time.perf_counter()
    try:
        result = await asyncio.to_thread(parse, content, ParseOptions(math=math))
    except DocmarkError as exc:
        _log_error("parse", content, exc)
        return ErrorResponse(error=str(exc))

    heading_count = count_nodes(result.tree)
    logger.info(
        "Document parsed",
        extra={
            "content_chars": len(content),
            "html_chars": len(result.html),
            "heading_count": heading_count,
            "meta_keys": sorted(result.meta),
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
        },
    )
    return ParseSuccessResponse(
        meta=result.meta,
        html=result.html,
        tree=result.tree,
        heading_count=heading_count,
    )


async def process_text(content: str) -> TextResponse | ErrorResponse:
    """Extract search tokens from a document."""
    try:
        text = await asyncio.to_thread(remove_markdown, content)
    except DocmarkError as exc:
        _log_error("text", content, exc)
        return ErrorResponse(error=str(exc))
    return TextResponse(text=text)


def _log_error(operation: str, content: str, exc: Exception) -> None:
    """Log a failed request with its context.

    Parameters
    ----------
    operation : str
        Name of the failed operation.
    content : str
        The document source that was being processed.
    exc : Exception
        The exception raised while processing.

    """
    logger.error(
        "Document processing failed",
        extra={
            "operation": operation,
            "content_chars": len(content),
            "error": str(exc),
        },
    )

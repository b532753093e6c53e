"""Parse pipeline for markdown -> meta, HTML and table of contents."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field

from docmark.config import DOCMARK_MATH_ENABLED, DOCMARK_TOC_MAX_LEVEL
from docmark.exceptions import RenderError
from docmark.headings import extract_headings
from docmark.meta import parse_meta
from docmark.outline import build_tree
from docmark.plaintext import remove_markdown
from docmark.renderer import Renderer, get_renderer
from docmark.schemas import OutlineNode, ParseResult
from docmark.transform import transform_html

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


@dataclass
class ParseOptions:
    """Options for document parsing.

    Attributes:
        math: Enable ``$...$`` math markup. None uses DOCMARK_MATH_ENABLED.
        toc_max_level: Deepest heading level kept in the outline.
        renderer: Markdown engine to use instead of the shared default.
    """

    math: bool | None = None
    toc_max_level: int = DOCMARK_TOC_MAX_LEVEL
    renderer: Renderer | None = field(default=None, repr=False)

    def resolve_renderer(self) -> Renderer:
        if self.renderer is not None:
            return self.renderer
        math = DOCMARK_MATH_ENABLED if self.math is None else self.math
        return get_renderer(math)


def parse(content: str, options: ParseOptions | None = None) -> ParseResult:
    """Parse a document into its meta directives, final HTML and outline.

    Never raises for malformed markdown: a failing engine degrades to an
    escaped copy of the source and an empty outline.
    """
    opts = options or ParseOptions()
    return ParseResult(
        meta=parse_meta(content),
        html=parse_content(content, opts),
        tree=parse_tree(content, opts),
    )


def parse_content(content: str, options: ParseOptions | None = None) -> str:
    """Render a document to its final, post-processed HTML."""
    opts = options or ParseOptions()
    try:
        rendered = opts.resolve_renderer().render(content)
    except RenderError as exc:
        logger.warning("Rendering failed, returning escaped source: %s", exc)
        return f"<pre>{html.escape(content)}</pre>"
    return transform_html(rendered)


def parse_tree(content: str, options: ParseOptions | None = None) -> list[OutlineNode]:
    """Build the table of contents of a document.

    HTML comments are removed first so commented-out headings stay hidden.
    """
    opts = options or ParseOptions()
    source = _COMMENT_RE.sub("", content)
    try:
        tokens = opts.resolve_renderer().parse(source)
    except RenderError as exc:
        logger.warning("Tokenizing failed, returning empty outline: %s", exc)
        return []
    return build_tree(extract_headings(tokens, max_level=opts.toc_max_level))


__all__ = [
    "ParseOptions",
    "parse",
    "parse_content",
    "parse_meta",
    "parse_tree",
    "remove_markdown",
]

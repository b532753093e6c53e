"""Markdown engine wiring: tokenizer, HTML renderer and code highlighting."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Protocol

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.rules_core import StateCore
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.attrs import attrs_block_plugin, attrs_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from docmark.config import DOCMARK_MATH_ENABLED, DOCMARK_TAB_WIDTH
from docmark.exceptions import RenderError
from docmark.text_utils import kebab_case

logger = logging.getLogger(__name__)

EXTERNAL_LINK_CLASS = "external-link"
INTERNAL_LINK_CLASS = "internal-link"
# Class the anchors plugin puts on heading permalinks.
PERMALINK_CLASS = "header-anchor"

_EXTERNAL_HREF_RE = re.compile(r"^(?:https?|ftp):", re.IGNORECASE)
_LEADING_TABS_RE = re.compile(r"^[ \t]*\t[ \t]*", re.MULTILINE)
_FORMATTER = HtmlFormatter(nowrap=True)
_MARKDOWN_OPTIONS = {
    "html": True,
    "linkify": True,
    "typographer": True,
}


class Renderer(Protocol):
    """Anything that can tokenize and render markdown source."""

    def parse(self, text: str) -> list[Token]:
        ...

    def render(self, text: str) -> str:
        ...


def highlight_code(code: str, lang: str, attrs: str = "") -> str:
    """Highlight a fenced code block, falling back to an escaped block."""
    if lang:
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = None
        if lexer is not None:
            try:
                highlighted = highlight(code, lexer, _FORMATTER)
                return f'<pre class="highlight"><code>{highlighted}</code></pre>'
            except Exception as exc:
                logger.debug("Highlighting failed for language %r: %s", lang, exc)
    return f"<pre><code>{escapeHtml(code)}</code></pre>"


def expand_leading_tabs(text: str, tab_width: int = DOCMARK_TAB_WIDTH) -> str:
    """Replace tabs in line indentation with spaces."""
    return _LEADING_TABS_RE.sub(lambda m: m.group(0).expandtabs(tab_width), text)


def _classify_links(state: StateCore) -> None:
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type != "link_open":
                continue
            href = str(child.attrGet("href") or "")
            if _EXTERNAL_HREF_RE.match(href):
                child.attrJoin("class", EXTERNAL_LINK_CLASS)
            else:
                child.attrJoin("class", INTERNAL_LINK_CLASS)


def _build_tokenizer(*, math: bool) -> MarkdownIt:
    # heading text must tokenize as in the renderer for anchors to match ids
    md = MarkdownIt("js-default", _MARKDOWN_OPTIONS)
    md.use(footnote_plugin)
    if math:
        md.use(dollarmath_plugin)
    return md


def _build_markdown(*, math: bool) -> MarkdownIt:
    md = MarkdownIt(
        "js-default", {**_MARKDOWN_OPTIONS, "highlight": highlight_code}
    )
    md.use(tasklists_plugin)
    md.use(footnote_plugin)
    md.use(attrs_plugin)
    md.use(attrs_block_plugin)
    # registered before the anchors so permalinks stay unclassified
    md.core.ruler.push("link_classes", _classify_links)
    md.use(
        anchors_plugin,
        min_level=1,
        max_level=6,
        slug_func=kebab_case,
        permalink=True,
        permalinkSymbol="",
        permalinkBefore=True,
        permalinkSpace=False,
    )
    if math:
        md.use(dollarmath_plugin)
    return md


class MarkdownRenderer:
    """markdown-it based renderer with the docmark extension set.

    ``parse`` tokenizes with a bare engine so heading inline children are not
    polluted by permalink or attribute tokens; ``render`` runs the full
    extension set.
    """

    def __init__(self, *, math: bool = False) -> None:
        self.math = math
        self._tokenizer = _build_tokenizer(math=math)
        self._markdown = _build_markdown(math=math)

    def parse(self, text: str) -> list[Token]:
        try:
            return self._tokenizer.parse(text)
        except Exception as exc:
            raise RenderError(f"Failed to tokenize document: {exc}") from exc

    def render(self, text: str) -> str:
        try:
            return self._markdown.render(expand_leading_tabs(text))
        except Exception as exc:
            raise RenderError(f"Failed to render document: {exc}") from exc


@lru_cache(maxsize=2)
def get_renderer(math: bool | None = None) -> MarkdownRenderer:
    """Return the shared renderer for the given math setting."""
    if math is None:
        math = DOCMARK_MATH_ENABLED
    return MarkdownRenderer(math=math)

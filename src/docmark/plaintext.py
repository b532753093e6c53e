"""Reduce markdown source to lowercase word tokens for search indexing."""

from __future__ import annotations

import re
from functools import lru_cache

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt

from docmark.config import DOCMARK_WORD_RANGES_ARABIC, DOCMARK_WORD_RANGES_CJK
from docmark.exceptions import ConfigurationError
from docmark.meta import META_DIRECTIVE_RE
from docmark.text_utils import deburr

_FENCED_CODE_RE = re.compile(r"```(?:[^`]|`)+?```")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_URL_RE = re.compile(r"(?:https?|ftp)://[^\s()<>\[\]]+", re.IGNORECASE)
_NEWLINE_RE = re.compile(r"\r?\n|\r")


def compile_word_pattern(*extra_ranges: str) -> re.Pattern[str]:
    """Build the word-token pattern with extra character ranges.

    Each range is inserted into a regex character class, e.g. ``"\\u0600-\\u06ff"``.
    """
    char_class = r"a-z0-9\-.," + "".join(extra_ranges)
    try:
        return re.compile(rf"\b[{char_class}]+\b")
    except re.error as exc:
        raise ConfigurationError(f"Invalid word character ranges: {exc}") from exc


WORD_PATTERN = compile_word_pattern(DOCMARK_WORD_RANGES_CJK, DOCMARK_WORD_RANGES_ARABIC)


@lru_cache(maxsize=1)
def _text_markdown() -> MarkdownIt:
    return MarkdownIt("commonmark", {"html": True})


def strip_markdown(content: str) -> str:
    """Render markdown and keep only its text nodes."""
    html = _text_markdown().render(content)
    return BeautifulSoup(html, "lxml").get_text(" ")


def remove_markdown(content: str, *, word_pattern: re.Pattern[str] | None = None) -> str:
    """Return the searchable text of a document as space-separated tokens.

    Comment directives, code blocks, inline code and URLs are dropped before
    the remaining text is deburred, lowercased and tokenized.
    """
    pattern = word_pattern or WORD_PATTERN
    text = META_DIRECTIVE_RE.sub("", content)
    text = _FENCED_CODE_RE.sub("", text)
    text = _INLINE_CODE_RE.sub("", text)
    text = _URL_RE.sub("", text)
    text = deburr(text).lower()
    text = _NEWLINE_RE.sub(" ", strip_markdown(text))
    return " ".join(pattern.findall(text))

"""Extract heading records from a markdown-it token stream."""

from __future__ import annotations

from typing import Iterable, Sequence

from markdown_it.token import Token

from docmark.config import DOCMARK_TOC_MAX_LEVEL
from docmark.schemas import HeadingRecord
from docmark.text_utils import kebab_case, normalize_whitespace

_TEXT_TOKEN_TYPES = {"text", "code_inline"}
_BREAK_TOKEN_TYPES = {"softbreak", "hardbreak"}


def extract_headings(
    tokens: Sequence[Token], *, max_level: int = DOCMARK_TOC_MAX_LEVEL
) -> list[HeadingRecord]:
    """Return the document headings in source order.

    Headings deeper than ``max_level`` are dropped entirely.
    """
    records = [
        record
        for record in _iter_heading_records(tokens)
        if record.level <= max_level
    ]
    return records


def _iter_heading_records(tokens: Sequence[Token]) -> Iterable[HeadingRecord]:
    seen: set[str] = set()
    for index, token in enumerate(tokens):
        if token.type != "heading_close" or index == 0:
            continue
        inline = tokens[index - 1]
        if inline.type != "inline":
            continue
        content, anchor_text = _heading_text(inline.children or [])
        yield HeadingRecord(
            content=content,
            anchor=_unique_slug(kebab_case(anchor_text), seen),
            level=int(token.tag[1]),
        )


def _unique_slug(slug: str, seen: set[str]) -> str:
    # Repeated headings get -1, -2, ... suffixes, matching the rendered ids.
    candidate = slug
    suffix = 1
    while candidate in seen:
        candidate = f"{slug}-{suffix}"
        suffix += 1
    seen.add(candidate)
    return candidate


def _heading_text(children: list[Token]) -> tuple[str, str]:
    """Return the display text and the text the anchor is slugged from."""
    # A heading that opens with a link is titled by the link text alone.
    if children and children[0].type == "link_open":
        text = normalize_whitespace(children[1].content) if len(children) > 1 else ""
        return text, text
    # Anchors are slugged from text and code spans only, as the rendered ids.
    anchor_text = "".join(
        child.content for child in children if child.type in _TEXT_TOKEN_TYPES
    )
    return normalize_whitespace(_plain_text(children)), anchor_text


def _plain_text(children: Iterable[Token]) -> str:
    parts: list[str] = []
    for child in children:
        if child.type in _TEXT_TOKEN_TYPES:
            parts.append(child.content)
        elif child.type in _BREAK_TOKEN_TYPES:
            parts.append(" ")
    return "".join(parts)

"""Text normalization helpers for anchors and search text."""

from __future__ import annotations

import re
import unicodedata

_APOSTROPHE_RE = re.compile(r"['’]")
_WORD_RE = re.compile(r"[^\W_]+")
# Split points inside a word: "fooBar" -> foo|Bar, "XMLHttp" -> XML|Http
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_WHITESPACE_RE = re.compile(r"\s+")


def deburr(text: str) -> str:
    """Strip combining diacritical marks (``"Crème"`` -> ``"Creme"``)."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return unicodedata.normalize("NFC", stripped)


def split_words(text: str) -> list[str]:
    """Split text into words on punctuation, whitespace and case changes."""
    text = _APOSTROPHE_RE.sub("", deburr(text))
    words: list[str] = []
    for chunk in _WORD_RE.findall(text):
        words.extend(part for part in _CAMEL_RE.split(chunk) if part)
    return words


def kebab_case(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated slug.

    >>> kebab_case("Getting Started: the fooBar API")
    'getting-started-the-foo-bar-api'
    """
    return "-".join(word.lower() for word in split_words(text))


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()

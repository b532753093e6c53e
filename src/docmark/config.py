"""Local configuration for docmark."""

from __future__ import annotations

import os

from docmark.exceptions import ConfigurationError


DEFAULT_TOC_MAX_LEVEL = 3
DEFAULT_TAB_WIDTH = 4
DEFAULT_LOG_LEVEL = "INFO"
# Extra word characters kept by plain-text extraction, as regex class ranges.
DEFAULT_WORD_RANGES_CJK = (
    "\u3000-\u303f\u3040-\u309f\u30a0-\u30ff\uff00-\uffef"
    "\u4e00-\u9faf\u2e80-\u2fd5\u3400-\u4dbf"
)
DEFAULT_WORD_RANGES_ARABIC = "\u0600-\u06ff\u0750-\u077f\ufb50-\ufdff\ufe70-\ufeff"



def _int_env(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


DOCMARK_TOC_MAX_LEVEL = _int_env("DOCMARK_TOC_MAX_LEVEL", DEFAULT_TOC_MAX_LEVEL)
DOCMARK_TAB_WIDTH = _int_env("DOCMARK_TAB_WIDTH", DEFAULT_TAB_WIDTH)
DOCMARK_MATH_ENABLED = _bool_env("DOCMARK_MATH_ENABLED", False)
DOCMARK_WORD_RANGES_CJK = os.getenv("DOCMARK_WORD_RANGES_CJK", DEFAULT_WORD_RANGES_CJK)
DOCMARK_WORD_RANGES_ARABIC = os.getenv(
    "DOCMARK_WORD_RANGES_ARABIC", DEFAULT_WORD_RANGES_ARABIC
)
DOCMARK_LOG_LEVEL = os.getenv("DOCMARK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

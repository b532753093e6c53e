"""Tests for slug and text helpers."""

from __future__ import annotations

import pytest

from docmark.text_utils import deburr, kebab_case, normalize_whitespace


class TestKebabCase:
    """Tests for kebab_case."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello World", "hello-world"),
            ("Getting Started: the fooBar API", "getting-started-the-foo-bar-api"),
            ("XMLHttpRequest", "xml-http-request"),
            ("  --Multiple   spaces--  ", "multiple-spaces"),
            ("Don't Stop", "dont-stop"),
            ("Don’t Stop", "dont-stop"),
            ("under_score", "under-score"),
            ("Crème Brûlée!", "creme-brulee"),
            ("API v2 Guide", "api-v2-guide"),
            ("日本語", "日本語"),
            ("", ""),
        ],
    )
    def test_slugs(self, text: str, expected: str) -> None:
        """Text is reduced to lowercase hyphenated words."""
        assert kebab_case(text) == expected


class TestDeburr:
    """Tests for deburr."""

    def test_strips_accents(self) -> None:
        """Latin diacritics are removed."""
        assert deburr("àéîõü ñ") == "aeiou n"

    def test_keeps_composed_scripts(self) -> None:
        """Scripts without diacritics come back composed."""
        assert deburr("한국어") == "한국어"


def test_normalize_whitespace() -> None:
    """Runs of whitespace collapse to one space."""
    assert normalize_whitespace("  a \n\t b  ") == "a b"

"""Test setup for docmark."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docmark.schemas import HeadingRecord  # noqa: E402
from docmark.text_utils import kebab_case  # noqa: E402


def make_records(*items: tuple[int, str]) -> list[HeadingRecord]:
    """Build heading records from ``(level, content)`` pairs."""
    return [
        HeadingRecord(content=content, anchor=kebab_case(content), level=level)
        for level, content in items
    ]


@pytest.fixture
def sectioned_html() -> str:
    """Rendered HTML with nested h2/h3 sections."""
    return (
        "<h1>A</h1><p>intro</p>"
        "<h2>B</h2><p>b</p>"
        "<h3>C</h3><p>c</p>"
        "<h2>D</h2><p>d</p>"
        "<h1>E</h1><p>e</p>"
    )

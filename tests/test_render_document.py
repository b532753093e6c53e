"""Tests for the render_document inspection script."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "render_document.py"


@pytest.fixture(scope="module")
def script():
    """The script loaded as a module."""
    spec = importlib.util.spec_from_file_location("render_document", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRenderDocument:
    """Tests for the script's output modes."""

    def test_stats_counts_sections_and_links(self, script, capsys) -> None:
        """Section containers and link classes are counted."""
        script.print_stats(
            '<h2>A</h2><div class="indent-h2"><p><a class="external-link" href="https://x.io">x</a></p>'
            '<h3>B</h3><div class="indent-h3"><iframe src="v"></iframe></div></div>'
        )

        lines = capsys.readouterr().out.splitlines()
        assert "h2 sections: 1" in lines
        assert "h3 sections: 1" in lines
        assert "embeds: 1" in lines
        assert "external links: 1" in lines
        assert "internal links: 0" in lines

    def test_outline_mode(self, script, tmp_path: Path, capsys, monkeypatch) -> None:
        """The outline is printed as an indented list."""
        source = tmp_path / "doc.md"
        source.write_text("# One\n\n## Two\n", encoding="utf-8")
        monkeypatch.setattr(
            sys, "argv", ["render_document.py", "--file", str(source), "--output", "outline"]
        )

        script.main()

        assert capsys.readouterr().out.splitlines() == ["- One (#one)", "  - Two (#two)"]

    def test_missing_file(self, script) -> None:
        """A missing file is reported clearly."""
        with pytest.raises(FileNotFoundError):
            script.load_source(url=None, file_path="/no/such/file.md")

"""Tests for the markdown engine wiring."""

from __future__ import annotations

from unittest.mock import patch

from docmark.html_utils import load_html
from docmark.renderer import (
    MarkdownRenderer,
    expand_leading_tabs,
    get_renderer,
    highlight_code,
)


class TestHighlightCode:
    """Tests for highlight_code."""

    def test_known_language_is_highlighted(self) -> None:
        """Pygments output is wrapped in a highlight block."""
        html = highlight_code("print('x')\n", "python")

        assert html.startswith('<pre class="highlight"><code>')
        assert "<span" in html

    def test_unknown_language_is_escaped(self) -> None:
        """Unknown languages fall back to an escaped block."""
        assert highlight_code("<b>x</b>", "no-such-lang") == (
            "<pre><code>&lt;b&gt;x&lt;/b&gt;</code></pre>"
        )

    def test_no_language_is_escaped(self) -> None:
        """Plain fences are escaped, not highlighted."""
        assert highlight_code("a < b", "") == "<pre><code>a &lt; b</code></pre>"

    def test_highlighter_failure_degrades(self) -> None:
        """A failing highlighter never propagates."""
        with patch("docmark.renderer.highlight", side_effect=RuntimeError("boom")):
            html = highlight_code("x = 1", "python")

        assert html == "<pre><code>x = 1</code></pre>"


class TestExpandLeadingTabs:
    """Tests for expand_leading_tabs."""

    def test_expands_indentation_only(self) -> None:
        """Tabs inside a line are kept."""
        assert expand_leading_tabs("\tcode\ntext\tinner") == "    code\ntext\tinner"

    def test_custom_width(self) -> None:
        """The tab width is configurable."""
        assert expand_leading_tabs("\t\tx", tab_width=2) == "    x"


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    def test_headings_get_ids_and_permalinks(self) -> None:
        """Headings carry a kebab-case id and a leading permalink."""
        soup = load_html(MarkdownRenderer().render("## Getting Started"))

        heading = soup.find("h2")
        assert heading["id"] == "getting-started"
        permalink = heading.find("a")
        assert permalink["class"] == ["header-anchor"]
        assert permalink["href"] == "#getting-started"

    def test_links_are_classified(self) -> None:
        """External and internal links get distinct classes."""
        soup = load_html(
            MarkdownRenderer().render("[Site](https://example.com) and [Page](/docs/page)")
        )

        external, internal = soup.find_all("a")
        assert "external-link" in external["class"]
        assert "internal-link" in internal["class"]

    def test_attribute_classes_on_links(self) -> None:
        """Trailing attribute blocks add classes to links."""
        soup = load_html(MarkdownRenderer().render("[Watch](https://youtu.be/abc123){.youtube}"))

        assert "youtube" in soup.find("a")["class"]

    def test_task_lists(self) -> None:
        """Task list items render checkboxes."""
        soup = load_html(MarkdownRenderer().render("- [x] done\n- [ ] todo"))

        assert len(soup.find_all("input", attrs={"type": "checkbox"})) == 2

    def test_math_is_opt_in(self) -> None:
        """Dollar math is only parsed when enabled."""
        assert 'class="math inline"' in MarkdownRenderer(math=True).render("$x^2$")
        assert "$x^2$" in MarkdownRenderer(math=False).render("$x^2$")

    def test_parse_uses_bare_tokenizer(self) -> None:
        """Tokenized headings have no permalink children."""
        tokens = MarkdownRenderer().parse("# Title")

        inline = tokens[1]
        assert [child.type for child in inline.children] == ["text"]

    def test_get_renderer_is_shared(self) -> None:
        """Renderers are cached per math setting."""
        assert get_renderer(False) is get_renderer(False)
        assert get_renderer(True).math is True

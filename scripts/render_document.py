"""Render a markdown document and print its HTML, outline or search text."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from docmark import ParseOptions, parse, remove_markdown
from docmark.html_utils import load_html


def main() -> None:
    parser = argparse.ArgumentParser(description="Render markdown with docmark and inspect the result.")
    parser.add_argument("--url", help="URL of a raw markdown document")
    parser.add_argument("--file", help="Local markdown file path")
    parser.add_argument(
        "--output",
        choices=("json", "html", "outline", "text", "stats"),
        default="json",
        help="What to print",
    )
    parser.add_argument("--math", action="store_true", help="Enable $...$ math markup")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    content = load_source(url=args.url, file_path=args.file)

    if args.output == "text":
        print(remove_markdown(content))
        return

    result = parse(content, ParseOptions(math=args.math))
    if args.output == "html":
        print(result.html)
    elif args.output == "outline":
        print_outline(result.to_dict()["tree"])
    elif args.output == "stats":
        print_stats(result.html)
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


def load_source(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def print_outline(nodes: list[dict], indent: int = 0) -> None:
    for node in nodes:
        print(f"{'  ' * indent}- {node['content']} (#{node['anchor']})")
        print_outline(node["nodes"], indent + 1)


def print_stats(html: str) -> None:
    soup = load_html(html)
    for label, selector in (
        ("h2 sections", "div.indent-h2"),
        ("h3 sections", "div.indent-h3"),
        ("embeds", "iframe, video"),
        ("external links", "a.external-link"),
        ("internal links", "a.internal-link"),
    ):
        print(f"{label}: {len(soup.select(selector))}")


if __name__ == "__main__":
    main()

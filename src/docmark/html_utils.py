"""Shared HTML tree utilities."""

from __future__ import annotations

from typing import Iterable

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML processing (pip install beautifulsoup4)."
    ) from exc


def load_html(html: str) -> BeautifulSoup:
    """Parse rendered HTML into a mutable tree without implied wrappers."""
    return BeautifulSoup(html, "html.parser")


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Return the node whose children are the document's top-level blocks.

    Rendered output is a fragment, so this is the soup itself; a literal
    <body> written in the markdown stays an ordinary element.
    """
    return soup


def serialize(soup: BeautifulSoup) -> str:
    """Serialize the document root's children back into an HTML string."""
    return find_document_root(soup).decode_contents()


def parse_fragment(html: str) -> list[PageElement]:
    """Parse an HTML fragment into detached nodes ready to be inserted."""
    root = find_document_root(load_html(html))
    return [node.extract() for node in list(root.contents)]


def first_element(container: Tag) -> Tag | None:
    return container.find(True, recursive=False)


def is_blank(node: PageElement) -> bool:
    """True for whitespace-only text nodes."""
    return isinstance(node, NavigableString) and not node.strip()


def get_classes(tag: Tag) -> list[str]:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return [name for name in classes if name]


def add_class(tag: Tag, *names: str) -> None:
    classes = get_classes(tag)
    for name in names:
        if name and name not in classes:
            classes.append(name)
    if classes:
        tag["class"] = classes


def remove_class(tag: Tag, *names: str) -> None:
    classes = [name for name in get_classes(tag) if name not in names]
    if classes:
        tag["class"] = classes
    elif tag.has_attr("class"):
        del tag["class"]


def siblings_until(node: PageElement, stop_names: Iterable[str]) -> list[PageElement]:
    """Collect the following siblings of ``node`` up to the first stop tag."""
    stops = set(stop_names)
    collected: list[PageElement] = []
    for sibling in node.next_siblings:
        if isinstance(sibling, Tag) and sibling.name in stops:
            break
        collected.append(sibling)
    return collected

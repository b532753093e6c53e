"""Post-process rendered HTML into the final sectioned document."""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup
from bs4.element import Tag

from docmark.html_utils import (
    add_class,
    find_document_root,
    first_element,
    get_classes,
    is_blank,
    load_html,
    remove_class,
    serialize,
    siblings_until,
)
from docmark.renderer import PERMALINK_CLASS
from docmark.video import embed_videos

GAPLESS_CLASS = "is-gapless"
ALIGN_CENTER_CLASS = "align-center"
H2_CONTAINER_CLASS = "indent-h2"
H3_CONTAINER_CLASS = "indent-h3"

_HEADING_LINK_SELECTOR = ", ".join(
    f"{name} > a:not(.{PERMALINK_CLASS})" for name in ("h1", "h2", "h3")
)

ContentRule = Callable[[BeautifulSoup], None]


def remove_leading_empty_paragraph(soup: BeautifulSoup) -> None:
    """Drop empty first paragraphs; mark a lone leading image as gapless."""
    root = find_document_root(soup)
    first = first_element(root)
    while first is not None and first.name == "p" and not first.contents:
        first.decompose()
        first = first_element(root)
    if first is None or first.name != "p":
        return
    if (
        len(first.contents) == 1
        and isinstance(first.contents[0], Tag)
        and first.contents[0].name == "img"
    ):
        add_class(first, GAPLESS_CLASS)


def strip_heading_links(soup: BeautifulSoup) -> None:
    """Unwrap links inside h1-h3, keeping only the permalink anchor."""
    for link in soup.select(_HEADING_LINK_SELECTOR):
        link.replace_with(link.get_text())


def hoist_blockquote_classes(soup: BeautifulSoup) -> None:
    """Move the classes of a top-level blockquote's last element onto it."""
    root = find_document_root(soup)
    for blockquote in root.find_all("blockquote", recursive=False):
        children = blockquote.find_all(True, recursive=False)
        if not children:
            continue
        last = children[-1]
        classes = get_classes(last)
        if not classes:
            continue
        del last["class"]
        add_class(blockquote, *classes)


def enclose_sections(soup: BeautifulSoup) -> None:
    """Wrap the content under each h2, then each h3, in an indent container."""
    _enclose(soup, "h2", ("h1", "h2"), H2_CONTAINER_CLASS)
    _enclose(soup, "h3", ("h1", "h2", "h3"), H3_CONTAINER_CLASS)


def _enclose(
    soup: BeautifulSoup,
    heading_name: str,
    boundaries: tuple[str, ...],
    container_class: str,
) -> None:
    for heading in soup.find_all(heading_name):
        content = siblings_until(heading, boundaries)
        container = _existing_container(content, container_class)
        if container is None:
            container = soup.new_tag("div", attrs={"class": container_class})
            heading.insert_after(container)
        for node in content:
            if node is container:
                continue
            container.append(node.extract())


def _existing_container(content: list, container_class: str) -> Tag | None:
    # A container left by an earlier pass sits right after its heading.
    for node in content:
        if is_blank(node):
            continue
        if (
            isinstance(node, Tag)
            and node.name == "div"
            and container_class in get_classes(node)
        ):
            return node
        return None
    return None


def promote_image_alignment(soup: BeautifulSoup) -> None:
    """Move ``align-center`` from images to their parent element."""
    for image in soup.select(f"img.{ALIGN_CENTER_CLASS}"):
        parent = image.parent
        if parent is None:
            continue
        add_class(parent, ALIGN_CENTER_CLASS)
        remove_class(image, ALIGN_CENTER_CLASS)


CONTENT_RULES: tuple[ContentRule, ...] = (
    remove_leading_empty_paragraph,
    strip_heading_links,
    hoist_blockquote_classes,
    enclose_sections,
    embed_videos,
    promote_image_alignment,
)


def transform_content(
    soup: BeautifulSoup, rules: tuple[ContentRule, ...] = CONTENT_RULES
) -> BeautifulSoup:
    """Run the rules in order over the same tree, mutating it in place."""
    for rule in rules:
        rule(soup)
    return soup


def transform_html(html: str) -> str:
    """Parse, transform and serialize a rendered HTML document."""
    soup = load_html(html)
    if all(is_blank(node) for node in find_document_root(soup).contents):
        return ""
    return serialize(transform_content(soup))

"""Replace links to known video hosts with embedded players."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass

import soupsieve
from bs4 import BeautifulSoup
from bs4.element import Tag

from docmark.html_utils import parse_fragment

logger = logging.getLogger(__name__)

PLACEHOLDER = "{0}"


@dataclass(frozen=True)
class VideoRule:
    """A link selector, an optional id pattern and the embed template.

    Without a pattern the whole href is substituted into the template.
    """

    name: str
    selector: str
    template: str
    pattern: re.Pattern[str] | None = None

    def matches(self, element: Tag) -> bool:
        return soupsieve.match(self.selector, element)


VIDEO_RULES: tuple[VideoRule, ...] = (
    VideoRule(
        name="youtube",
        selector="a.youtube",
        pattern=re.compile(
            r"(?:(?:youtu\.be/|v/|vi/|u/\w/|embed/)|(?:(?:watch)?\?v(?:i)?=|&v(?:i)?=))([^#&?]*).*",
            re.IGNORECASE,
        ),
        template=(
            '<iframe width="640" height="360" '
            'src="https://www.youtube.com/embed/{0}?rel=0" '
            'frameborder="0" allowfullscreen></iframe>'
        ),
    ),
    VideoRule(
        name="vimeo",
        selector="a.vimeo",
        pattern=re.compile(
            r"vimeo\.com/(?:channels/(?:\w+/)?|groups/(?:[^/]*)/videos/|album/(?:\d+)/video/|)(\d+)(?:$|/|\?)",
            re.IGNORECASE,
        ),
        template=(
            '<iframe src="https://player.vimeo.com/video/{0}" width="640" '
            'height="360" frameborder="0" webkitallowfullscreen '
            "mozallowfullscreen allowfullscreen></iframe>"
        ),
    ),
    VideoRule(
        name="dailymotion",
        selector="a.dailymotion",
        pattern=re.compile(
            r"(?:dailymotion\.com(?:/embed)?(?:/video|/hub)|dai\.ly)/([0-9a-z]+)(?:[-_0-9a-zA-Z]+(?:#video=)?([a-z0-9]+)?)?",
            re.IGNORECASE,
        ),
        template=(
            '<iframe width="640" height="360" '
            'src="//www.dailymotion.com/embed/video/{0}?endscreen-enable=false" '
            'frameborder="0" allowfullscreen></iframe>'
        ),
    ),
    VideoRule(
        name="video",
        selector="a.video",
        template=(
            '<video width="640" height="360" controls preload="metadata">'
            '<source src="{0}" type="video/mp4"></video>'
        ),
    ),
)


def extract_video_id(rule: VideoRule, href: str) -> str:
    """Pull the video identifier out of ``href``.

    The last non-empty capture group wins, then the whole match. An href the
    pattern does not match is used as-is.
    """
    if rule.pattern is None:
        return href
    match = rule.pattern.search(href)
    if not match:
        return href
    captures = [group for group in (match.group(0), *match.groups()) if group]
    return captures[-1]


def render_embed(rule: VideoRule, href: str) -> str:
    identifier = html.escape(extract_video_id(rule, href), quote=True)
    return rule.template.replace(PLACEHOLDER, identifier, 1)


def resolve_video(rule: VideoRule, element: Tag) -> bool:
    """Replace ``element`` with the rule's embed if the rule applies.

    Returns True when the element was replaced.
    """
    if not rule.matches(element):
        return False
    href = element.get("href")
    if not href:
        logger.debug("Skipping %s video link without href", rule.name)
        return False
    element.replace_with(*parse_fragment(render_embed(rule, str(href))))
    return True


def embed_videos(soup: BeautifulSoup, rules: tuple[VideoRule, ...] = VIDEO_RULES) -> None:
    """Apply the video rules in priority order.

    A replaced link leaves the tree, so only the first matching rule applies
    to any given element.
    """
    for rule in rules:
        for element in soup.select(rule.selector):
            resolve_video(rule, element)

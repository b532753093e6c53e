"""Build a nested table of contents from a flat heading list."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from docmark.schemas import HeadingRecord, OutlineNode

logger = logging.getLogger(__name__)


def build_outline(
    records: Sequence[HeadingRecord], start_level: int = 1, start: int = 0
) -> tuple[list[OutlineNode], int]:
    """Group headings from ``start`` into a forest at ``start_level``.

    Returns the forest and the index of the first record that was not
    consumed, i.e. the first heading shallower than ``start_level`` (or the
    end of the list).

    Deeper headings become children of the most recent node at this level.
    Levels may skip (an H1 followed directly by an H3), in which case the
    subtree is built at the deeper level. A deeper run with no node to attach
    to is promoted into the current sequence instead of being dropped.
    """
    forest: list[OutlineNode] = []
    index = start
    while index < len(records):
        record = records[index]
        if record.level < start_level:
            break

        if record.level == start_level:
            forest.append(
                OutlineNode(
                    content=record.content, anchor=record.anchor, level=record.level
                )
            )
            index += 1
            continue

        subtree, index = build_outline(records, record.level, index)
        if forest and forest[-1].level < record.level:
            forest[-1].children.extend(subtree)
        else:
            logger.debug(
                "Promoting %d orphan heading(s) at level %d", len(subtree), record.level
            )
            forest.extend(subtree)

    return forest, index


def build_tree(records: Sequence[HeadingRecord]) -> list[OutlineNode]:
    """Build the full outline forest for a document."""
    forest, _ = build_outline(records)
    return forest


def flatten_outline(forest: Iterable[OutlineNode]) -> list[HeadingRecord]:
    """Flatten an outline depth-first back into heading records."""
    records: list[HeadingRecord] = []
    for node in forest:
        records.append(
            HeadingRecord(content=node.content, anchor=node.anchor, level=node.level)
        )
        records.extend(flatten_outline(node.children))
    return records


def count_nodes(forest: Iterable[OutlineNode]) -> int:
    """Count total nodes in the outline."""
    total = 0
    for node in forest:
        total += 1
        total += count_nodes(node.children)
    return total

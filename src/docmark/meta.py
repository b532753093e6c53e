"""Extract ``<!-- key: value -->`` directives from document source."""

from __future__ import annotations

import re

META_DIRECTIVE_RE = re.compile(r"<!-- ?([a-zA-Z]+):(.*)-->")


def parse_meta(content: str) -> dict[str, str]:
    """Return directive values keyed by lowercased name.

    A key that appears more than once keeps its last value.
    """
    return {
        match.group(1).lower(): match.group(2).strip()
        for match in META_DIRECTIVE_RE.finditer(content)
    }

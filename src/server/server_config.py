"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_MAX_CONTENT_CHARS = 2_000_000

MAX_CONTENT_CHARS = int(os.getenv("DOCMARK_MAX_CONTENT_CHARS", str(DEFAULT_MAX_CONTENT_CHARS)))
APP_TITLE = "docmark"
APP_DESCRIPTION = "Render markdown documents into sectioned HTML with a table of contents."

HOST = os.getenv("HOST", "0.0.0.0")  # noqa: S104
PORT = int(os.getenv("PORT", "8000"))
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

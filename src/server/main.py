"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from docmark.utils.logging_config import get_logger
from server.routers import parse
from server.server_config import APP_DESCRIPTION, APP_TITLE

logger = get_logger(__name__)

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(parse.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}

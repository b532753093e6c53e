"""Heading and outline tree models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HeadingRecord(BaseModel):
    """A heading found in the token stream, before nesting."""

    model_config = ConfigDict(frozen=True)

    content: str
    anchor: str
    level: int = Field(..., ge=1, le=6)


class OutlineNode(BaseModel):
    """A node of the table of contents.

    ``level`` is kept for tree building and is left out of the serialized
    form; children serialize under ``nodes``.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: str
    anchor: str
    level: int = Field(..., ge=1, le=6, exclude=True)
    children: list["OutlineNode"] = Field(default_factory=list, alias="nodes")

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{content, anchor, nodes}`` mapping."""
        return self.model_dump(by_alias=True)

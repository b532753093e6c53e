"""Full parse output model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from docmark.schemas.outline import OutlineNode


class ParseResult(BaseModel):
    """Meta directives, final HTML and outline of one document."""

    meta: dict[str, str] = Field(default_factory=dict)
    html: str = ""
    tree: list[OutlineNode] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

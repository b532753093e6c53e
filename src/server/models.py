"""Pydantic models for the parse API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from docmark.schemas import OutlineNode
from server.server_config import MAX_CONTENT_CHARS


class ParseRequest(BaseModel):
    """Request model for the /api/parse endpoint.

    Attributes
    ----------
    content : str
        Markdown source of the document.
    math : bool | None
        Enable math markup; ``None`` uses the server default.

    """

    content: str = Field(..., max_length=MAX_CONTENT_CHARS, description="Markdown source")
    math: bool | None = Field(default=None, description="Enable $...$ math markup")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate that ``content`` is not blank."""
        if not v.strip():
            err = "content cannot be empty"
            raise ValueError(err)
        return v


class TextRequest(BaseModel):
    """Request model for the /api/text endpoint."""

    content: str = Field(..., max_length=MAX_CONTENT_CHARS, description="Markdown source")


class ParseSuccessResponse(BaseModel):
    """Success response model for the /api/parse endpoint.

    Attributes
    ----------
    meta : dict[str, str]
        Values of ``<!-- key: value -->`` directives.
    html : str
        Final post-processed HTML.
    tree : list[OutlineNode]
        Table of contents; children serialize under ``nodes``.
    heading_count : int
        Number of headings in the table of contents.

    """

    meta: dict[str, str] = Field(default_factory=dict, description="Meta directives")
    html: str = Field(..., description="Rendered HTML")
    tree: list[OutlineNode] = Field(default_factory=list, description="Table of contents")
    heading_count: int = Field(default=0, ge=0, description="Headings in the outline")


class TextResponse(BaseModel):
    """Response model for the /api/text endpoint."""

    text: str = Field(..., description="Space separated search tokens")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


ParseResponse = Union[ParseSuccessResponse, ErrorResponse]

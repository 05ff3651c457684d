"""Pydantic schemas for pagination and export API requests/responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_paginator.constants.layout_constants import BlockKind
from resume_paginator.models.document import ResumeDocumentIn
from resume_paginator.templates import DEFAULT_TEMPLATE


class MeasuredHeight(BaseModel):
    """Height of one block measured by the client."""

    kind: BlockKind
    index: int = Field(0, ge=0)
    height: float = Field(ge=0)


class PaginationRequest(BaseModel):
    """Document to paginate, optionally with client-side measurements."""

    document: ResumeDocumentIn
    template: str = DEFAULT_TEMPLATE
    heights: list[MeasuredHeight] | None = Field(
        default=None,
        description="Client measurements; blocks not listed fall back to configured heights",
    )


class ExportRequest(BaseModel):
    document: ResumeDocumentIn
    template: str = DEFAULT_TEMPLATE


class PlacedBlockResponse(BaseModel):
    kind: BlockKind
    index: int
    title: str = ""
    height: float


class PageResponse(BaseModel):
    number: int = Field(description="1-based page number")
    height: float = Field(description="Sum of block heights on this page")
    oversized: bool = Field(description="Whether the content exceeds the safe height")
    blocks: list[PlacedBlockResponse]


class PaginationResponse(BaseModel):
    page_count: int
    budget: float = Field(description="Safe content height of one page")
    page_width: float
    page_height: float
    pages: list[PageResponse]

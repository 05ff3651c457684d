"""Pagination and export routes for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse, Response

from resume_paginator.api.schemas.pagination import (
    ExportRequest,
    PageResponse,
    PaginationRequest,
    PaginationResponse,
    PlacedBlockResponse,
)
from resume_paginator.config import LayoutConfig, load_layout_config
from resume_paginator.models.layout import Page
from resume_paginator.services.document_loader import document_from_model
from resume_paginator.services.measurement import HeightTable
from resume_paginator.services.pagination import build_measurer, paginate, render_resume_pdf
from resume_paginator.templates import get_template
from resume_paginator.utils.export import ExportError, document_to_export_dict, resume_filename

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pagination"])


def _check_template(name: str) -> None:
    try:
        get_template(name)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _layout_config() -> LayoutConfig:
    try:
        return load_layout_config()
    except ValueError as exc:
        logger.error("Invalid layout configuration: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Invalid layout configuration: {exc}",
        ) from exc


def _page_to_response(number: int, page: Page) -> PageResponse:
    return PageResponse(
        number=number,
        height=page.height,
        oversized=page.oversized,
        blocks=[
            PlacedBlockResponse(
                kind=entry.block.kind,
                index=entry.block.index,
                title=entry.block.title,
                height=entry.height,
            )
            for entry in page.entries
        ],
    )


@router.post(
    "/pagination",
    response_model=PaginationResponse,
    summary="Paginate a resume",
    description="Split a resume into pages; work and education items are never split.",
    responses={
        400: {"description": "Unknown template"},
        500: {"description": "Invalid layout configuration"},
    },
)
def paginate_resume(request: PaginationRequest) -> PaginationResponse:
    _check_template(request.template)
    config = _layout_config()
    document = document_from_model(request.document)

    if request.heights is not None:
        measure = HeightTable({(h.kind, h.index): h.height for h in request.heights})
    else:
        measure = build_measurer(config, request.template)

    pages = paginate(document, config, measure)
    return PaginationResponse(
        page_count=len(pages),
        budget=config.safe_content_height,
        page_width=config.page_width,
        page_height=config.page_height,
        pages=[_page_to_response(number, page) for number, page in enumerate(pages, start=1)],
    )


@router.post(
    "/export/pdf",
    summary="Export a resume as PDF",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"description": "Unknown template or empty resume"},
        500: {"description": "Invalid layout configuration"},
    },
)
def export_pdf(request: ExportRequest) -> Response:
    _check_template(request.template)
    config = _layout_config()
    document = document_from_model(request.document)
    try:
        pdf_bytes, page_count = render_resume_pdf(document, config, request.template)
    except ExportError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    filename = resume_filename(document.get("title"), "pdf")
    logger.info("Exported %s with %d page(s)", filename, page_count)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Page-Count": str(page_count),
        },
    )


@router.post(
    "/export/json",
    summary="Export a resume as JSON",
    description="Return the document with HTML removed from descriptions.",
)
def export_json(request: ExportRequest) -> JSONResponse:
    document = document_from_model(request.document)
    filename = resume_filename(document.get("title"), "json")
    return JSONResponse(
        content=document_to_export_dict(document),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

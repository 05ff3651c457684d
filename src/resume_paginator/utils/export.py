"""Export utilities for writing paginated resumes to PDF and JSON."""

from __future__ import annotations

import copy
import json
import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.errors import FPDFException

from resume_paginator.constants.layout_constants import PX_TO_PT
from resume_paginator.templates import get_template
from resume_paginator.utils.rich_text import strip_html

if TYPE_CHECKING:
    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Page
    from resume_paginator.services.resume_data import ResumeDocument
    from resume_paginator.templates.base import PageTemplate

logger = logging.getLogger(__name__)

__all__ = [
    "ExportError",
    "document_to_export_dict",
    "export_to_json",
    "export_to_pdf",
    "new_pdf",
    "render_pdf_bytes",
    "resume_filename",
]


class ExportError(Exception):
    """Raised when pages cannot be written out."""


def resume_filename(title: str | None, extension: str) -> str:
    """Lower-case *title* with every non-alphanumeric character replaced by ``_``."""
    base = re.sub(r"[^a-z0-9]", "_", (title or "resume").lower())
    return f"{base or 'resume'}.{extension}"


def new_pdf(config: LayoutConfig) -> FPDF:
    """Create an empty document whose user unit is one CSS pixel."""
    pdf = FPDF(unit=PX_TO_PT, format=(config.page_width, config.page_height))
    pdf.set_margins(config.padding, config.padding, config.padding)
    pdf.set_auto_page_break(auto=False)
    return pdf


def _render(pages: Sequence[Page], config: LayoutConfig, template: PageTemplate) -> FPDF:
    if not pages:
        raise ExportError("No resume pages to export")

    pdf = new_pdf(config)
    for number, page in enumerate(pages, start=1):
        logger.debug("Rendering page %d/%d", number, len(pages))
        pdf.add_page()
        pdf.set_xy(config.padding, config.padding)
        for block in page.blocks:
            template.block_height(pdf, block, config.content_width, dry_run=False)
        template.paint_footer(pdf, number, len(pages), config)
    return pdf


def render_pdf_bytes(
    pages: Sequence[Page],
    config: LayoutConfig,
    template: PageTemplate | None = None,
) -> bytes:
    """Render *pages* into one PDF, one fixed-size page each, in order."""
    template = template or get_template()
    try:
        return bytes(_render(pages, config, template).output())
    except FPDFException as exc:
        raise ExportError(f"PDF rendering failed: {exc}") from exc


def export_to_pdf(
    pages: Sequence[Page],
    output_path: Path,
    config: LayoutConfig,
    template: PageTemplate | None = None,
) -> Path:
    """Export *pages* to a PDF file.

    Args:
        pages: Packed pages, in order
        output_path: Full path for the output file
        config: Page geometry the pages were packed for
        template: Template used to draw blocks (default: classic)

    Returns:
        Path to the created file
    """
    data = render_pdf_bytes(pages, config, template)
    output_path.write_bytes(data)
    logger.info("PDF exported: %s (%d page(s))", output_path, len(pages))
    return output_path


def document_to_export_dict(document: ResumeDocument) -> dict:
    """Copy *document* with HTML removed from every description."""
    clean = copy.deepcopy(dict(document))
    for key in ("work_experience", "education"):
        for item in clean.get(key) or []:
            item["description"] = strip_html(item.get("description"))
    return clean


def export_to_json(document: ResumeDocument, output_path: Path) -> Path:
    """Export *document* as pretty-printed JSON with plain-text descriptions."""
    payload = document_to_export_dict(document)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return output_path

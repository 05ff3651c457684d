"""High-level pagination and export entry points.

Wires the fpdf2 measurer, the packer and the exporter together for
callers that start from a resume document (CLI, API, TUI).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from resume_paginator.config import load_layout_config
from resume_paginator.services.fpdf_measurer import FpdfMeasurer
from resume_paginator.services.measurement import CachedMeasurer
from resume_paginator.services.navigator import PageNavigator
from resume_paginator.services.packer import pack
from resume_paginator.templates import DEFAULT_TEMPLATE, get_template
from resume_paginator.utils.export import export_to_pdf, render_pdf_bytes

if TYPE_CHECKING:
    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Page
    from resume_paginator.services.measurement import MeasureFn
    from resume_paginator.services.resume_data import ResumeDocument

logger = logging.getLogger(__name__)

__all__ = [
    "build_measurer",
    "export_resume_pdf",
    "paginate",
    "render_resume_pdf",
]


def build_measurer(config: LayoutConfig, template_name: str = DEFAULT_TEMPLATE) -> CachedMeasurer:
    """Return a cached fpdf2 measurer for *template_name*."""
    return CachedMeasurer(FpdfMeasurer(config, get_template(template_name)))


def paginate(
    document: ResumeDocument,
    config: LayoutConfig | None = None,
    measure: MeasureFn | None = None,
    template_name: str = DEFAULT_TEMPLATE,
) -> list[Page]:
    """Measure and pack *document* with the configured page geometry."""
    config = config or load_layout_config()
    measure = measure or build_measurer(config, template_name)
    return pack(
        document,
        config.safe_content_height,
        measure,
        fallback_heights=config.fallback_heights,
        keep_header_with_first_item=config.keep_header_with_first_item,
    )


def render_resume_pdf(
    document: ResumeDocument,
    config: LayoutConfig | None = None,
    template_name: str = DEFAULT_TEMPLATE,
) -> tuple[bytes, int]:
    """Paginate *document* and return ``(pdf_bytes, page_count)``."""
    config = config or load_layout_config()
    pages = paginate(document, config, template_name=template_name)
    return render_pdf_bytes(pages, config, get_template(template_name)), len(pages)


def export_resume_pdf(
    document: ResumeDocument,
    output_path: Path,
    config: LayoutConfig | None = None,
    template_name: str = DEFAULT_TEMPLATE,
    navigator: PageNavigator | None = None,
) -> Path:
    """Paginate *document* and write every page to *output_path*.

    When a *navigator* is given, it is switched to export mode for the
    duration of the export and restored afterwards.
    """
    config = config or load_layout_config()
    pages = paginate(document, config, template_name=template_name)
    navigator = navigator or PageNavigator()
    navigator.update(pages)
    with navigator.exporting_all() as visible:
        return export_to_pdf(visible, output_path, config, get_template(template_name))

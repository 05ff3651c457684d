"""Measurement provider backed by the fpdf2 layout engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_paginator.services.measurement import MeasurementProvider
from resume_paginator.templates import get_template
from resume_paginator.utils.export import new_pdf

if TYPE_CHECKING:
    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Block
    from resume_paginator.templates.base import PageTemplate

__all__ = ["FpdfMeasurer"]


class FpdfMeasurer(MeasurementProvider):
    """Measures blocks by laying them out off-page in dry-run mode.

    Heights come from the same template code the PDF export draws with,
    at the configured content width.
    """

    def __init__(self, config: LayoutConfig, template: PageTemplate | None = None) -> None:
        self.config = config
        self.template = template or get_template()
        self._pdf = new_pdf(config)
        self._pdf.add_page()

    def measure(self, block: Block) -> float:
        self._pdf.set_xy(self.config.padding, self.config.padding)
        return self.template.block_height(
            self._pdf, block, self.config.content_width, dry_run=True
        )

"""Abstract base class for page templates.

A template knows how to draw each block kind onto an fpdf2 page.  The
same drawing code runs in dry-run mode to measure a block, so measured
heights and exported pages never disagree.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING

from fpdf.enums import MethodReturnValue, XPos, YPos

from resume_paginator.constants.layout_constants import PX_TO_PT

if TYPE_CHECKING:
    from fpdf import FPDF

    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Block

__all__ = ["BlockCanvas", "PageTemplate"]

FONT_FAMILY = "Helvetica"

Color = tuple[int, int, int]

# Core PDF fonts only cover Latin-1.
_TYPOGRAPHIC = str.maketrans(
    {
        "\u2022": "\u00b7",
        "\u2013": "-",
        "\u2014": "-",
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u2026": "...",
        "\u00a0": " ",
    }
)


class BlockCanvas:
    """Vertical cursor for one block, drawing or only measuring.

    All lengths are in page units (CSS pixels).  Font sizes are given in
    pixels as well and converted to points for fpdf2.
    """

    def __init__(self, pdf: FPDF, width: float, *, dry_run: bool = False) -> None:
        self.pdf = pdf
        self.width = width
        self.dry_run = dry_run
        self.left = pdf.l_margin
        self.top = pdf.get_y()
        self.height = 0.0

    @property
    def y(self) -> float:
        return self.top + self.height

    def set_font(self, size: float, style: str = "", color: Color = (0, 0, 0)) -> None:
        self.pdf.set_font(FONT_FAMILY, style, size * PX_TO_PT)
        self.pdf.set_text_color(*color)

    def _multi_cell(
        self,
        text: str,
        *,
        width: float,
        line_height: float,
        align: str,
        markdown: bool,
        x: float,
    ) -> float:
        if self.dry_run:
            return self.pdf.multi_cell(
                width,
                line_height,
                text,
                align=align,
                markdown=markdown,
                dry_run=True,
                output=MethodReturnValue.HEIGHT,
            )
        self.pdf.set_xy(x, self.y)
        self.pdf.multi_cell(
            width,
            line_height,
            text,
            align=align,
            markdown=markdown,
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        return self.pdf.get_y() - self.y

    def text(
        self,
        text: str,
        *,
        size: float,
        style: str = "",
        line_height: float = 1.43,
        align: str = "L",
        color: Color = (0, 0, 0),
        indent: float = 0.0,
        markdown: bool = False,
    ) -> float:
        """Write wrapped *text* and advance; returns the height used."""
        text = PageTemplate.clean_text(text)
        if not text:
            return 0.0
        self.set_font(size, style, color)
        used = self._multi_cell(
            text,
            width=self.width - indent,
            line_height=size * line_height,
            align=align,
            markdown=markdown,
            x=self.left + indent,
        )
        self.height += used
        return used

    def row(
        self,
        left: str,
        right: str,
        *,
        left_size: float,
        right_size: float,
        left_style: str = "B",
        line_height: float = 1.75,
        gap: float = 16.0,
        right_color: Color = (85, 85, 85),
    ) -> float:
        """Wrapped *left* text with *right* text pinned to the right edge."""
        left = PageTemplate.clean_text(left)
        right = PageTemplate.clean_text(right)

        self.set_font(right_size, "", right_color)
        right_width = self.pdf.get_string_width(right) if right else 0.0
        right_line = right_size * line_height
        if right and not self.dry_run:
            self.pdf.set_xy(self.left + self.width - right_width, self.y)
            self.pdf.cell(right_width, right_line, right, align="R")

        left_used = 0.0
        if left:
            self.set_font(left_size, left_style)
            left_width = self.width - right_width - (gap if right else 0.0)
            left_used = self._multi_cell(
                left,
                width=left_width,
                line_height=left_size * line_height,
                align="L",
                markdown=False,
                x=self.left,
            )

        used = max(left_used, right_line if right else 0.0)
        self.height += used
        return used

    def rule(self, thickness: float, color: Color = (26, 26, 26)) -> None:
        """Horizontal line across the full width."""
        if not self.dry_run:
            self.pdf.set_draw_color(*color)
            self.pdf.set_line_width(thickness)
            mid = self.y + thickness / 2
            self.pdf.line(self.left, mid, self.left + self.width, mid)
        self.height += thickness

    def escape_markdown(self, text: str) -> str:
        """Make *text* print literally inside a ``markdown=True`` line."""
        escape = self.pdf.MARKDOWN_ESCAPE_CHARACTER
        text = PageTemplate.clean_text(text).replace(escape, escape * 2)
        markers = "|".join(re.escape(marker) for marker in self.pdf.MARKDOWN_MARKERS)
        return re.sub(markers, lambda match: escape + match.group(0), text)

    def space(self, amount: float) -> None:
        self.height += amount

    def finish(self) -> float:
        if not self.dry_run:
            self.pdf.set_xy(self.left, self.y)
        return self.height


class PageTemplate(ABC):
    """Interface that every page template must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name."""

    @abstractmethod
    def paint_block(self, canvas: BlockCanvas, block: Block) -> None:
        """Draw (or, on a dry-run canvas, measure) *block*."""

    def block_height(self, pdf: FPDF, block: Block, width: float, *, dry_run: bool) -> float:
        """Run :meth:`paint_block` at the current position and return its height."""
        canvas = BlockCanvas(pdf, width, dry_run=dry_run)
        self.paint_block(canvas, block)
        return canvas.finish()

    def paint_footer(
        self, pdf: FPDF, page_number: int, page_count: int, config: LayoutConfig
    ) -> None:
        """Write "Page i of n" in the bottom-right corner of multi-page documents."""
        if page_count <= 1:
            return
        label = f"Page {page_number} of {page_count}"
        pdf.set_font(FONT_FAMILY, "", 10 * PX_TO_PT)
        pdf.set_text_color(153, 153, 153)
        label_width = pdf.get_string_width(label)
        pdf.set_xy(config.page_width - 24 - label_width, config.page_height - 16 - 14)
        pdf.cell(label_width, 14, label, align="R")

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def clean_text(text: str | None) -> str:
        """Normalise *text* so the core PDF fonts can encode it."""
        if not text:
            return ""
        text = text.translate(_TYPOGRAPHIC)
        return text.encode("latin-1", errors="replace").decode("latin-1").strip()

    @staticmethod
    def format_date(value: str | None, current: bool = False) -> str:
        """Return ``Jan 2020`` for an ISO date, ``Present`` when *current*.

        Values that are not ISO dates are shown unchanged.
        """
        if current:
            return "Present"
        if not value:
            return ""
        try:
            parsed = date.fromisoformat(value[:10])
        except ValueError:
            return value
        return parsed.strftime("%b %Y")

    @staticmethod
    def format_date_range(start: str | None, end: str | None, current: bool = False) -> str:
        """Return a range like ``Aug 2018 - May 2021``; the end is ``Present`` when current."""
        start_str = PageTemplate.format_date(start)
        end_str = PageTemplate.format_date(end, current)
        if start_str and end_str:
            return f"{start_str} - {end_str}"
        return start_str or end_str

"""Classic single-column resume pages.

Centered name and contact line, uppercase ruled section headers, bold
position titles with the date range pinned right, and ``Category: a, b``
skill lines.  Sizes are CSS pixels matching the browser preview.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import BlockKind
from resume_paginator.templates.base import BlockCanvas, PageTemplate
from resume_paginator.utils.rich_text import html_to_lines

if TYPE_CHECKING:
    from resume_paginator.models.layout import Block

__all__ = ["ClassicPageTemplate", "CompactPageTemplate"]

_INK = (26, 26, 26)
_BODY = (51, 51, 51)
_MUTED = (85, 85, 85)


class ClassicPageTemplate(PageTemplate):
    """Layout used by the interactive preview and the default export."""

    scale = 1.0

    @property
    def name(self) -> str:
        return "Classic"

    def _px(self, value: float) -> float:
        return value * self.scale

    def paint_block(self, canvas: BlockCanvas, block: Block) -> None:
        painter = {
            BlockKind.PERSONAL_INFO: self._personal_info,
            BlockKind.SECTION_HEADER: self._section_header,
            BlockKind.SKILLS_HEADER: self._section_header,
            BlockKind.WORK_ITEM: self._work_item,
            BlockKind.EDUCATION_ITEM: self._education_item,
            BlockKind.SKILLS_CONTENT: self._skills,
        }[block.kind]
        painter(canvas, block)

    # ------------------------------------------------------------------

    def _personal_info(self, canvas: BlockCanvas, block: Block) -> None:
        info = block.payload or {}
        canvas.text(
            info.get("full_name") or "Your Name",
            size=self._px(28),
            style="B",
            line_height=1.235,
            align="C",
            color=_INK,
        )
        canvas.space(self._px(8))

        contact = [
            info.get(key)
            for key in ("email", "phone", "location", "linkedin", "website")
            if info.get(key)
        ]
        if contact:
            canvas.text(" • ".join(contact), size=self._px(12), align="C", color=_MUTED)

        summary = info.get("summary")
        if summary:
            canvas.space(self._px(16))
            canvas.text(summary, size=self._px(13), line_height=1.6, color=_BODY)

        canvas.space(self._px(24))

    def _section_header(self, canvas: BlockCanvas, block: Block) -> None:
        canvas.text(block.title.upper(), size=self._px(16), style="B", line_height=1.6, color=_INK)
        canvas.space(self._px(4))
        canvas.rule(2, _INK)
        canvas.space(self._px(16))

    def _description(self, canvas: BlockCanvas, html: str | None) -> None:
        for line in html_to_lines(html):
            canvas.space(self._px(4))
            if line.bullet:
                canvas.text(
                    f"{line.bullet} {line.text}",
                    size=self._px(12),
                    line_height=1.6,
                    color=_BODY,
                    indent=self._px(20),
                )
            else:
                canvas.text(line.text, size=self._px(12), line_height=1.6, color=_BODY)

    def _dates(self, item: dict) -> str:
        return self.format_date_range(
            item.get("start_date"), item.get("end_date"), item.get("current", False)
        )

    def _work_item(self, canvas: BlockCanvas, block: Block) -> None:
        item = block.payload or {}
        canvas.row(
            item.get("position", ""),
            self._dates(item),
            left_size=self._px(14),
            right_size=self._px(12),
        )
        canvas.text(item.get("company_name", ""), size=self._px(13), style="I")
        canvas.space(self._px(4))
        self._description(canvas, item.get("description"))
        canvas.space(self._px(16))

    def _education_item(self, canvas: BlockCanvas, block: Block) -> None:
        item = block.payload or {}
        degree = item.get("degree", "")
        if item.get("field_of_study"):
            degree = f"{degree} in {item['field_of_study']}"
        canvas.row(
            degree,
            self._dates(item),
            left_size=self._px(14),
            right_size=self._px(12),
        )
        canvas.text(item.get("institution", ""), size=self._px(13), style="I")
        self._description(canvas, item.get("description"))
        canvas.space(self._px(16))

    def _skills(self, canvas: BlockCanvas, block: Block) -> None:
        for group in block.payload or []:
            category = canvas.escape_markdown(group["category"])
            names = ", ".join(canvas.escape_markdown(name) for name in group["names"])
            canvas.text(
                f"**{category}:** {names}",
                size=self._px(12),
                color=_BODY,
                markdown=True,
            )
            canvas.space(self._px(8))


class CompactPageTemplate(ClassicPageTemplate):
    """Classic layout at 90% scale, for fitting long resumes on fewer pages."""

    scale = 0.9

    @property
    def name(self) -> str:
        return "Compact"

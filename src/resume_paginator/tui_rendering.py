from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import BlockKind
from resume_paginator.templates.base import PageTemplate
from resume_paginator.utils.rich_text import html_to_lines

if TYPE_CHECKING:
    from resume_paginator.models.layout import Block, Page


def _escape(text: str) -> str:
    return re.sub(r"([\\`*_~\[\]#<>|])", r"\\\1", text)


def _description_lines(html: str | None) -> list[str]:
    out: list[str] = []
    for line in html_to_lines(html):
        out.append(f"- {line.text}" if line.bullet else line.text)
    return out


def _heading(title: str, dates: str) -> str:
    return f"### {title} ({dates})" if dates else f"### {title}"


def render_block_markdown(block: Block) -> str:
    payload = block.payload or {}
    parts: list[str] = []

    if block.kind is BlockKind.PERSONAL_INFO:
        parts.append(f"# {payload.get('full_name') or 'Your Name'}")
        contact = [
            payload[key]
            for key in ("email", "phone", "location", "linkedin", "website")
            if payload.get(key)
        ]
        if contact:
            parts.append(" • ".join(contact))
        if payload.get("summary"):
            parts.append(f"\n{payload['summary']}")

    elif block.kind in (BlockKind.SECTION_HEADER, BlockKind.SKILLS_HEADER):
        parts.append(f"## {block.title.upper()}")

    elif block.kind is BlockKind.WORK_ITEM:
        dates = PageTemplate.format_date_range(
            payload.get("start_date"), payload.get("end_date"), payload.get("current", False)
        )
        parts.append(_heading(payload.get("position", ""), dates))
        parts.append(f"*{payload.get('company_name', '')}*")
        parts.extend(_description_lines(payload.get("description")))

    elif block.kind is BlockKind.EDUCATION_ITEM:
        degree = payload.get("degree", "")
        if payload.get("field_of_study"):
            degree = f"{degree} in {payload['field_of_study']}"
        dates = PageTemplate.format_date_range(
            payload.get("start_date"), payload.get("end_date"), payload.get("current", False)
        )
        parts.append(_heading(degree, dates))
        parts.append(f"*{payload.get('institution', '')}*")
        parts.extend(_description_lines(payload.get("description")))

    elif block.kind is BlockKind.SKILLS_CONTENT:
        for group in block.payload or []:
            names = ", ".join(_escape(name) for name in group["names"])
            parts.append(f"- **{_escape(group['category'])}:** {names}")

    return "\n".join(parts)


def render_page_markdown(page: Page, number: int, count: int) -> str:
    parts = [render_block_markdown(block) for block in page.blocks]
    footer = f"Page {number} of {count}"
    if page.oversized:
        footer += " (content overflows this page)"
    parts.append(f"\n---\n_{footer}_")
    return "\n\n".join(parts)


def render_page_summary(pages: Sequence[Page], budget: float) -> str:
    """One line per page: block count, used height, and overflow marker."""
    if not pages:
        return "(No pages: the document is empty)"
    lines = []
    for number, page in enumerate(pages, start=1):
        kinds = ", ".join(f"{block.kind.value}#{block.index}" for block in page.blocks)
        marker = "  OVERSIZED" if page.oversized else ""
        used = f"{page.height:.0f}/{budget:.0f}px"
        lines.append(f"Page {number}: {len(page)} block(s), {used}{marker}")
        lines.append(f"  {kinds}")
    return "\n".join(lines)

"""Turn a resume document into the blocks the packer places."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import (
    EDUCATION_SECTION_TITLE,
    SKILLS_SECTION_TITLE,
    WORK_SECTION_TITLE,
    BlockKind,
)
from resume_paginator.models.layout import Block
from resume_paginator.services.skill_grouping import group_skills

if TYPE_CHECKING:
    from resume_paginator.services.resume_data import ResumeDocument

__all__ = ["DocumentBlocks", "SectionBlocks", "build_blocks", "sort_by_order"]


def sort_by_order(items: list[dict]) -> list[dict]:
    """Sort items by their ``order`` field; ties keep their original position."""
    return sorted(items, key=lambda item: item.get("order", 0))


@dataclass(frozen=True)
class SectionBlocks:
    """A section header followed by its atomic items."""

    header: Block
    items: tuple[Block, ...]


@dataclass(frozen=True)
class DocumentBlocks:
    """Every block of one document, grouped the way the packer walks them."""

    personal_info: Block | None = None
    work: SectionBlocks | None = None
    education: SectionBlocks | None = None
    skills_header: Block | None = None
    skills_content: Block | None = None

    def all_blocks(self) -> tuple[Block, ...]:
        """Blocks in document order."""
        blocks: list[Block] = []
        if self.personal_info is not None:
            blocks.append(self.personal_info)
        for section in (self.work, self.education):
            if section is not None:
                blocks.append(section.header)
                blocks.extend(section.items)
        if self.skills_header is not None and self.skills_content is not None:
            blocks.extend((self.skills_header, self.skills_content))
        return tuple(blocks)


def _section(kind: BlockKind, title: str, items: list[dict]) -> SectionBlocks | None:
    if not items:
        return None
    header_index = 0 if kind is BlockKind.WORK_ITEM else 1
    header = Block.create(BlockKind.SECTION_HEADER, header_index, title=title)
    ordered = sort_by_order(items)
    return SectionBlocks(
        header=header,
        items=tuple(
            Block.create(kind, idx, payload=copy.deepcopy(item)) for idx, item in enumerate(ordered)
        ),
    )


def build_blocks(document: ResumeDocument) -> DocumentBlocks:
    """Build the block list for *document*.

    Payloads are deep copies, so later edits to *document* never leak into
    blocks or pages built from it.  Sections without items produce no
    blocks at all.
    """
    personal_info = document.get("personal_info")
    personal_block = (
        Block.create(BlockKind.PERSONAL_INFO, payload=copy.deepcopy(personal_info))
        if personal_info
        else None
    )

    skills_header = skills_content = None
    groups = group_skills(document.get("skills") or [])
    if groups:
        skills_header = Block.create(BlockKind.SKILLS_HEADER, title=SKILLS_SECTION_TITLE)
        skills_content = Block.create(BlockKind.SKILLS_CONTENT, payload=groups)

    return DocumentBlocks(
        personal_info=personal_block,
        work=_section(
            BlockKind.WORK_ITEM, WORK_SECTION_TITLE, list(document.get("work_experience") or [])
        ),
        education=_section(
            BlockKind.EDUCATION_ITEM, EDUCATION_SECTION_TITLE, list(document.get("education") or [])
        ),
        skills_header=skills_header,
        skills_content=skills_content,
    )

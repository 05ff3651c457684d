"""Greedy page packer.

Walks the document once (personal info, work experience, education,
skills) and fills the current page until the next unit would overflow the
budget, then starts a new page.  There is no look-ahead and no
rebalancing.  Work and education items are atomic: an item that does not
fit moves whole to a fresh page, and an item taller than a whole page is
placed anyway and reported as oversized.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from resume_paginator.models.layout import Block, Page, PlacedBlock
from resume_paginator.services.blocks import SectionBlocks, build_blocks
from resume_paginator.services.measurement import resolve_heights

if TYPE_CHECKING:
    from resume_paginator.constants.layout_constants import BlockKind
    from resume_paginator.services.measurement import MeasureFn
    from resume_paginator.services.resume_data import ResumeDocument

logger = logging.getLogger(__name__)

__all__ = ["pack"]


class _PageBuilder:
    """Mutable state of a single pack pass."""

    def __init__(self, budget: float, heights: Mapping[tuple[BlockKind, int], float]) -> None:
        self.budget = budget
        self.heights = heights
        self.pages: list[Page] = []
        self.entries: list[PlacedBlock] = []
        self.current_height = 0.0

    def height_of(self, block: Block) -> float:
        return self.heights[block.key]

    def fits(self, height: float) -> bool:
        return self.current_height + height <= self.budget

    def start_new_page(self) -> None:
        if self.entries:
            logger.debug("Page %d saved: %.0fpx used", len(self.pages) + 1, self.current_height)
            self.pages.append(
                Page(entries=tuple(self.entries), oversized=self.current_height > self.budget)
            )
        self.entries = []
        self.current_height = 0.0

    def place(self, block: Block) -> None:
        height = self.height_of(block)
        self.entries.append(PlacedBlock(block=block, height=height))
        self.current_height += height

    def place_unit(self, *blocks: Block) -> None:
        """Place *blocks* together, moving all of them to a new page if needed."""
        total = sum(self.height_of(block) for block in blocks)
        if total > self.budget:
            logger.warning(
                "%s is too large (%.0fpx) for one page; shorten it to fit within %.0fpx",
                " + ".join(f"{block.kind.value} #{block.index}" for block in blocks),
                total,
                self.budget,
            )
        if not self.fits(total):
            self.start_new_page()
        for block in blocks:
            self.place(block)

    def finish(self) -> list[Page]:
        self.start_new_page()
        return self.pages


def _pack_section(
    builder: _PageBuilder, section: SectionBlocks, keep_header_with_first_item: bool
) -> None:
    items = list(section.items)
    header_height = builder.height_of(section.header)

    if keep_header_with_first_item and items:
        first = items[0]
        unit = header_height + builder.height_of(first)
        # Only keep them together when the pair fits on a page at all;
        # otherwise fall through to the independent checks.
        if unit <= builder.budget:
            builder.place_unit(section.header, first)
            items = items[1:]
        else:
            builder.place_unit(section.header)
    else:
        builder.place_unit(section.header)

    for item in items:
        height = builder.height_of(item)
        logger.debug(
            "%s #%d: %.0fpx (current %.0fpx, available %.0fpx)",
            item.kind.value,
            item.index,
            height,
            builder.current_height,
            builder.budget - builder.current_height,
        )
        builder.place_unit(item)


def pack(
    document: ResumeDocument,
    budget: float,
    measure: MeasureFn,
    *,
    fallback_heights: Mapping[BlockKind, float] | None = None,
    keep_header_with_first_item: bool = True,
) -> list[Page]:
    """Partition *document* into pages whose content fits *budget*.

    Args:
        document: Resume snapshot; it is not modified and pages do not alias it.
        budget: Safe content height of one page.
        measure: Height provider; every block is measured before packing.
        fallback_heights: Heights used when a block cannot be measured; kinds
            left out use the defaults.
        keep_header_with_first_item: Move a section header to the next page
            together with its first item instead of leaving it alone at the
            bottom of a page.

    Returns:
        Pages in order.  An empty document yields an empty list.
    """
    if budget <= 0:
        raise ValueError("budget must be positive")

    blocks = build_blocks(document)
    heights = resolve_heights(blocks.all_blocks(), measure, fallback_heights)
    builder = _PageBuilder(budget, heights)

    logger.debug("Pagination starting (safe height %.0fpx)", budget)

    if blocks.personal_info is not None:
        builder.place_unit(blocks.personal_info)

    for section in (blocks.work, blocks.education):
        if section is not None:
            _pack_section(builder, section, keep_header_with_first_item)

    if blocks.skills_header is not None and blocks.skills_content is not None:
        builder.place_unit(blocks.skills_header, blocks.skills_content)

    pages = builder.finish()
    logger.info("Pagination complete: %d page(s) generated", len(pages))
    return pages

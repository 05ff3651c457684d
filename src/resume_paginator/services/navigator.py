"""Page navigation and export-mode state for preview consumers."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import PREVIEW_CONTAINER_MARGIN

if TYPE_CHECKING:
    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Page

logger = logging.getLogger(__name__)

__all__ = ["PageNavigator", "fit_scale"]


def fit_scale(
    container_width: float,
    page_width: float,
    max_zoom: float,
    margin: float = PREVIEW_CONTAINER_MARGIN,
) -> float:
    """Scale that makes a page fill *container_width*, capped at *max_zoom*."""
    available = max(container_width - margin, 0.0)
    return min(available / page_width, max_zoom)


class PageNavigator:
    """Owns the page list, the selected page and the export flag.

    The preview shows one page at a time; while exporting every page is
    visible so it can be captured.
    """

    def __init__(self, pages: Sequence[Page] = ()) -> None:
        self._pages: tuple[Page, ...] = tuple(pages)
        self._index = 0
        self._exporting = False
        self.scale = 1.0

    # ------------------------------------------------------------------
    # Page list

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._pages

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_page(self) -> Page | None:
        if not self._pages:
            return None
        return self._pages[self._index]

    def update(self, pages: Sequence[Page]) -> None:
        """Replace the page list after a re-pack.

        The selected index is kept when still valid and reset to the first
        page otherwise.
        """
        self._pages = tuple(pages)
        if self._index >= len(self._pages):
            self._index = 0

    # ------------------------------------------------------------------
    # Navigation

    def go_to(self, index: int) -> int:
        if not self._pages:
            self._index = 0
        else:
            self._index = max(0, min(index, len(self._pages) - 1))
        return self._index

    def first(self) -> int:
        return self.go_to(0)

    def previous(self) -> int:
        return self.go_to(self._index - 1)

    def next(self) -> int:
        return self.go_to(self._index + 1)

    def last(self) -> int:
        return self.go_to(len(self._pages) - 1)

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._pages) - 1

    @property
    def label(self) -> str:
        if not self._pages:
            return "No pages"
        return f"Page {self._index + 1} of {len(self._pages)}"

    @property
    def show_navigation(self) -> bool:
        return len(self._pages) > 1 and not self._exporting

    @property
    def show_quick_jump(self) -> bool:
        return len(self._pages) > 2 and not self._exporting

    # ------------------------------------------------------------------
    # Export mode

    @property
    def exporting(self) -> bool:
        return self._exporting

    def start_export(self) -> None:
        logger.info("Export: rendering all %d page(s)", len(self._pages))
        self._exporting = True

    def end_export(self) -> None:
        logger.info("Export: restoring normal view")
        self._exporting = False

    @contextmanager
    def exporting_all(self) -> Iterator[tuple[Page, ...]]:
        """Show every page for the duration of an export."""
        self.start_export()
        try:
            yield self.visible_pages()
        finally:
            self.end_export()

    def visible_pages(self) -> tuple[Page, ...]:
        if self._exporting:
            return self._pages
        current = self.current_page
        return (current,) if current is not None else ()

    # ------------------------------------------------------------------
    # Zoom

    def fit_to(self, container_width: float, config: LayoutConfig) -> float:
        self.scale = fit_scale(container_width, config.page_width, config.max_zoom)
        return self.scale

    @property
    def caption(self) -> str:
        count = len(self._pages)
        plural = "s" if count != 1 else ""
        return f"Preview: {round(self.scale * 100)}% • {count} page{plural}"

"""Re-pagination on document change.

Every change bumps a revision.  A pack waits for the measurement provider
to report readiness, then runs to completion; its result is applied only
if no newer change arrived in the meantime.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resume_paginator.services.measurement import MeasurementProvider
from resume_paginator.services.navigator import PageNavigator
from resume_paginator.services.packer import pack

if TYPE_CHECKING:
    from resume_paginator.config import LayoutConfig
    from resume_paginator.models.layout import Page
    from resume_paginator.services.measurement import MeasureFn
    from resume_paginator.services.resume_data import ResumeDocument

logger = logging.getLogger(__name__)

__all__ = ["PaginationController"]


class PaginationController:
    """Keeps a :class:`PageNavigator` in sync with the latest document."""

    def __init__(
        self,
        measure: MeasureFn,
        config: LayoutConfig,
        navigator: PageNavigator | None = None,
    ) -> None:
        self.measure = measure
        self.config = config
        self.navigator = navigator or PageNavigator()
        self._revision = 0
        self.discarded = 0

    @property
    def revision(self) -> int:
        return self._revision

    def document_changed(self) -> int:
        """Record a change and return the revision a pack must carry."""
        self._revision += 1
        return self._revision

    def apply(self, revision: int, pages: list[Page]) -> bool:
        """Install *pages* unless a newer change superseded *revision*."""
        if revision != self._revision:
            self.discarded += 1
            logger.debug(
                "Discarding stale pagination (revision %d, latest %d)", revision, self._revision
            )
            return False
        self.navigator.update(pages)
        return True

    def pack(self, document: ResumeDocument) -> list[Page]:
        return pack(
            document,
            self.config.safe_content_height,
            self.measure,
            fallback_heights=self.config.fallback_heights,
            keep_header_with_first_item=self.config.keep_header_with_first_item,
        )

    def refresh(self, document: ResumeDocument) -> list[Page]:
        """Synchronously re-pack *document* and install the result."""
        revision = self.document_changed()
        pages = self.pack(document)
        self.apply(revision, pages)
        return pages

    async def repaginate(self, document: ResumeDocument) -> list[Page] | None:
        """Re-pack *document* once measurements are ready.

        Returns:
            The new pages, or ``None`` when a newer document arrived while
            waiting and this result was dropped.
        """
        revision = self.document_changed()
        if isinstance(self.measure, MeasurementProvider):
            await self.measure.wait_ready()
        if revision != self._revision:
            self.discarded += 1
            logger.debug("Revision %d superseded before packing", revision)
            return None
        pages = self.pack(document)
        return pages if self.apply(revision, pages) else None

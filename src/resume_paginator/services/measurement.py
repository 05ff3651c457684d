"""Block height measurement.

A measurement provider answers ``height(block)`` in page content units at
the fixed content width.  The packer never talks to a provider directly:
:func:`resolve_heights` asks for every block of a document up front and
substitutes the configured fallback for anything that cannot be measured.

Fallback table (see ``DEFAULT_FALLBACK_HEIGHTS``):

==================  =====
block kind          px
==================  =====
personal info       120
section header      40
work item           100
education item      80
skills header       40
skills content      100
==================  =====

Too small a fallback risks a page that overflows visually; too large a
fallback wastes space.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import DEFAULT_FALLBACK_HEIGHTS, BlockKind

if TYPE_CHECKING:
    from resume_paginator.models.layout import Block

logger = logging.getLogger(__name__)

__all__ = [
    "CachedMeasurer",
    "HeightTable",
    "MeasureFn",
    "MeasurementProvider",
    "resolve_heights",
]

MeasureFn = Callable[["Block"], "float | None"]
BlockKey = tuple[BlockKind, int]


class MeasurementProvider(ABC):
    """Interface every height source implements.

    Providers are callables so a plain function can be used wherever a
    provider is expected.
    """

    @abstractmethod
    def measure(self, block: Block) -> float | None:
        """Return the rendered height of *block*, or ``None`` if unknown."""

    async def wait_ready(self) -> None:
        """Wait until the provider can produce real measurements.

        Providers that render synchronously are always ready.
        """
        return None

    def __call__(self, block: Block) -> float | None:
        return self.measure(block)


class HeightTable(MeasurementProvider):
    """Provider backed by heights measured elsewhere, keyed by block identity."""

    def __init__(self, heights: Mapping[BlockKey, float]) -> None:
        self._heights = dict(heights)

    def measure(self, block: Block) -> float | None:
        return self._heights.get(block.key)


class CachedMeasurer(MeasurementProvider):
    """Memoizes another provider per (kind, index, content) identity.

    Failed or unusable measurements are not cached so they are retried on
    the next pack.
    """

    def __init__(self, provider: MeasureFn) -> None:
        self._provider = provider
        self._cache: dict[tuple[BlockKind, int, str], float] = {}
        self.hits = 0
        self.misses = 0

    def measure(self, block: Block) -> float | None:
        key = (block.kind, block.index, block.fingerprint)
        if key in self._cache:
            self.hits += 1
            return self._cache[key]

        self.misses += 1
        height = self._provider(block)
        if _is_usable(height):
            self._cache[key] = float(height)
        return height

    async def wait_ready(self) -> None:
        if isinstance(self._provider, MeasurementProvider):
            await self._provider.wait_ready()

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


def _is_usable(height: object) -> bool:
    if isinstance(height, bool) or not isinstance(height, (int, float)):
        return False
    return math.isfinite(height) and height >= 0


def resolve_heights(
    blocks: Iterable[Block],
    measure: MeasureFn,
    fallback_heights: Mapping[BlockKind, float] | None = None,
) -> dict[BlockKey, float]:
    """Measure every block before any packing decision is made.

    Exceptions, ``None`` and negative or non-finite heights never abort the
    pass: the block's kind fallback is used and a warning is logged.  Kinds
    missing from *fallback_heights* use ``DEFAULT_FALLBACK_HEIGHTS``.
    """
    fallbacks = {**DEFAULT_FALLBACK_HEIGHTS, **(fallback_heights or {})}
    heights: dict[BlockKey, float] = {}

    for block in blocks:
        try:
            height = measure(block)
        except Exception as exc:
            heights[block.key] = float(fallbacks[block.kind])
            logger.warning(
                "Measuring %s #%d failed (%s); falling back to %.0fpx",
                block.kind.value,
                block.index,
                exc,
                heights[block.key],
            )
            continue

        if not _is_usable(height):
            height = fallbacks[block.kind]
            logger.warning(
                "No usable measurement for %s #%d; falling back to %.0fpx",
                block.kind.value,
                block.index,
                height,
            )

        heights[block.key] = float(height)

    return heights

"""Layout configuration.

Defaults describe an A4 page. Any value can be overridden through the
environment, e.g. ``RESUME_PAGE_HEIGHT=1056`` for US Letter:

- ``RESUME_PAGE_WIDTH`` / ``RESUME_PAGE_HEIGHT``
- ``RESUME_PAGE_PADDING``
- ``RESUME_SAFETY_MARGIN``
- ``RESUME_MAX_ZOOM``
- ``RESUME_KEEP_HEADER_WITH_ITEM`` (``true``/``false``)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from resume_paginator.constants.layout_constants import (
    A4_HEIGHT,
    A4_WIDTH,
    DEFAULT_FALLBACK_HEIGHTS,
    MAX_PREVIEW_ZOOM,
    PAGE_PADDING,
    RENDER_CLEARANCE,
    SAFETY_MARGIN,
    BlockKind,
)

__all__ = ["LayoutConfig", "load_layout_config"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LayoutConfig:
    """Physical page description and pagination tunables."""

    page_width: float = A4_WIDTH
    page_height: float = A4_HEIGHT
    padding: float = PAGE_PADDING
    safety_margin: float = SAFETY_MARGIN
    render_clearance: float = RENDER_CLEARANCE
    max_zoom: float = MAX_PREVIEW_ZOOM
    keep_header_with_first_item: bool = True
    fallback_heights: Mapping[BlockKind, float] = field(
        default_factory=lambda: dict(DEFAULT_FALLBACK_HEIGHTS)
    )

    def __post_init__(self) -> None:
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError("page dimensions must be positive")
        if self.padding < 0 or self.safety_margin < 0:
            raise ValueError("padding and safety_margin cannot be negative")
        if self.content_width <= 0 or self.safe_content_height <= 0:
            raise ValueError("padding and safety margin leave no room for content")
        if self.max_zoom <= 0:
            raise ValueError("max_zoom must be positive")
        missing = [kind.value for kind in BlockKind if kind not in self.fallback_heights]
        if missing:
            raise ValueError(f"fallback_heights is missing entries for: {', '.join(missing)}")

    @property
    def content_width(self) -> float:
        """Width every block is measured and drawn at."""
        return self.page_width - 2 * self.padding

    @property
    def content_height(self) -> float:
        return self.page_height - 2 * self.padding

    @property
    def safe_content_height(self) -> float:
        """Height budget the packer fills on each page."""
        return self.content_height - self.safety_margin

    @property
    def render_height(self) -> float:
        """Height of the clipped render box inside a page."""
        return self.content_height - self.render_clearance


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_layout_config() -> LayoutConfig:
    """Return the layout configuration, allowing overrides via environment variables."""
    return LayoutConfig(
        page_width=_env_float("RESUME_PAGE_WIDTH", A4_WIDTH),
        page_height=_env_float("RESUME_PAGE_HEIGHT", A4_HEIGHT),
        padding=_env_float("RESUME_PAGE_PADDING", PAGE_PADDING),
        safety_margin=_env_float("RESUME_SAFETY_MARGIN", SAFETY_MARGIN),
        max_zoom=_env_float("RESUME_MAX_ZOOM", MAX_PREVIEW_ZOOM),
        keep_header_with_first_item=_env_bool("RESUME_KEEP_HEADER_WITH_ITEM", True),
    )

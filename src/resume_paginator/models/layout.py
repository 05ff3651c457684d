"""Blocks and pages produced by the paginator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from resume_paginator.constants.layout_constants import BlockKind

__all__ = ["Block", "Page", "PlacedBlock", "content_fingerprint"]


def content_fingerprint(payload: Any) -> str:
    """Return a stable string describing *payload*'s content."""
    return json.dumps(payload, sort_keys=True, default=str)


@dataclass(frozen=True)
class Block:
    """An atomic, independently measured unit of page content.

    ``index`` is the position inside the block's section after sorting
    (``0`` for singleton blocks).  Together with ``kind`` and the content
    fingerprint it identifies the block for measurement caching.
    """

    kind: BlockKind
    index: int = 0
    title: str = ""
    payload: Any = field(default=None, hash=False)
    fingerprint: str = ""

    @classmethod
    def create(
        cls,
        kind: BlockKind,
        index: int = 0,
        *,
        title: str = "",
        payload: Any = None,
    ) -> Block:
        fingerprint = content_fingerprint({"title": title, "payload": payload})
        return cls(kind=kind, index=index, title=title, payload=payload, fingerprint=fingerprint)

    @property
    def key(self) -> tuple[BlockKind, int]:
        """(kind, index) pair naming this block within one document."""
        return (self.kind, self.index)

    @property
    def is_atomic_item(self) -> bool:
        return self.kind in (BlockKind.WORK_ITEM, BlockKind.EDUCATION_ITEM)


@dataclass(frozen=True)
class PlacedBlock:
    """A block together with the height it was packed with."""

    block: Block
    height: float


@dataclass(frozen=True)
class Page:
    """Ordered blocks assigned to one physical page."""

    entries: tuple[PlacedBlock, ...]
    oversized: bool = False

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(entry.block for entry in self.entries)

    @property
    def height(self) -> float:
        return sum(entry.height for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

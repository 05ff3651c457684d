"""Template registry for page rendering."""

from __future__ import annotations

from resume_paginator.templates.base import BlockCanvas, PageTemplate
from resume_paginator.templates.classic import ClassicPageTemplate, CompactPageTemplate

__all__ = [
    "BlockCanvas",
    "DEFAULT_TEMPLATE",
    "PageTemplate",
    "get_template",
    "list_templates",
]

DEFAULT_TEMPLATE = "classic"

_REGISTRY: dict[str, PageTemplate] = {
    "classic": ClassicPageTemplate(),
    "compact": CompactPageTemplate(),
}


def get_template(name: str = DEFAULT_TEMPLATE) -> PageTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)

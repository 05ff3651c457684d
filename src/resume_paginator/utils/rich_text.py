"""Helpers for the HTML produced by the rich-text editor."""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

__all__ = ["RichTextLine", "html_to_lines", "strip_html"]

_BLOCK_TAGS = ["p", "li", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"]


@dataclass(frozen=True)
class RichTextLine:
    """One paragraph or list item of a description."""

    text: str
    bullet: str = ""  # "•" or "3." for list items, empty for paragraphs


def _normalize(text: str) -> str:
    return " ".join(text.split())


def _own_text(node: Tag) -> str:
    """Text of *node* without the text of nested block elements."""
    parts = [
        str(s) for s in node.find_all(string=True) if s.find_parent(_BLOCK_TAGS) is node
    ]
    return _normalize(" ".join(parts))


def _bullet_for(node: Tag) -> str:
    if node.name != "li":
        return ""
    parent = node.find_parent(["ul", "ol"])
    if parent is None or parent.name == "ul":
        return "•"
    siblings = parent.find_all("li", recursive=False)
    position = next((i for i, sibling in enumerate(siblings, 1) if sibling is node), 1)
    return f"{position}."


def html_to_lines(html: str | None) -> list[RichTextLine]:
    """Flatten rich-text HTML into paragraphs and list items.

    Plain text without markup is split on line breaks.
    """
    if not html or not html.strip():
        return []

    soup = BeautifulSoup(html, "html.parser")
    lines: list[RichTextLine] = []
    for node in soup.find_all(_BLOCK_TAGS):
        text = _own_text(node)
        if text:
            lines.append(RichTextLine(text=text, bullet=_bullet_for(node)))

    if lines:
        return lines

    text = soup.get_text("\n")
    return [RichTextLine(text=_normalize(line)) for line in text.splitlines() if line.strip()]


def strip_html(html: str | None) -> str:
    """Return the text content of *html*."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()

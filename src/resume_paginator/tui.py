from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Markdown, Static

from resume_paginator.config import LayoutConfig, load_layout_config
from resume_paginator.models.document import InvalidDocumentError
from resume_paginator.services.controller import PaginationController
from resume_paginator.services.document_loader import load_document_file
from resume_paginator.services.navigator import PageNavigator
from resume_paginator.services.pagination import build_measurer
from resume_paginator.tui_rendering import render_page_markdown
from resume_paginator.utils.export import ExportError, export_to_pdf, resume_filename


class ResumePreviewTUI(App[None]):
    """One-page-at-a-time preview of a paginated resume."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("home", "first_page", "First"),
        ("left", "previous_page", "Prev"),
        ("right", "next_page", "Next"),
        ("end", "last_page", "Last"),
        ("r", "reload", "Reload"),
        ("e", "export_pdf", "Export PDF"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#page-container {
    border: heavy $primary;
    background: $surface;
    height: 1fr;
    padding: 1;
}

#statusbar {
    height: auto;
    padding: 1;
    border: heavy $primary;
    background: $panel;
    color: $text;
}
"""

    def __init__(self, document_path: Path, config: LayoutConfig | None = None) -> None:
        super().__init__()
        self._document_path = document_path
        self._config = config or load_layout_config()
        self._controller = PaginationController(build_measurer(self._config), self._config)
        self._document: dict | None = None

    @property
    def navigator(self) -> PageNavigator:
        return self._controller.navigator

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(Markdown("", id="page"), id="page-container")
        yield Static("", id="statusbar")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Resume Preview"
        self.action_reload()

    # ------------------------------------------------------------------

    def _set_status(self, message: str) -> None:
        self.query_one("#statusbar", Static).update(message)

    def _show_current_page(self) -> None:
        nav = self.navigator
        page = nav.current_page
        if page is None:
            self.query_one("#page", Markdown).update("_Nothing to preview: the document is empty._")
            self._set_status(nav.caption)
            return
        markdown = render_page_markdown(page, nav.index + 1, nav.page_count)
        self.query_one("#page", Markdown).update(markdown)
        self._set_status(f"{nav.label} • {nav.caption}")

    def action_reload(self) -> None:
        try:
            self._document = load_document_file(self._document_path)
        except InvalidDocumentError as exc:
            self._set_status(f"❌ {exc}")
            return
        self._controller.refresh(self._document)
        self._show_current_page()

    def action_first_page(self) -> None:
        self.navigator.first()
        self._show_current_page()

    def action_previous_page(self) -> None:
        self.navigator.previous()
        self._show_current_page()

    def action_next_page(self) -> None:
        self.navigator.next()
        self._show_current_page()

    def action_last_page(self) -> None:
        self.navigator.last()
        self._show_current_page()

    def action_export_pdf(self) -> None:
        if self._document is None:
            return
        output = self._document_path.with_name(
            resume_filename(self._document.get("title"), "pdf")
        )
        nav = self.navigator
        try:
            with nav.exporting_all() as pages:
                export_to_pdf(pages, output, self._config)
        except ExportError as exc:
            self._set_status(f"❌ Export failed: {exc}")
            return
        self._set_status(f"✅ Exported {nav.page_count} page(s) to {output}")


def main(document_path: Path, config: LayoutConfig | None = None) -> None:
    ResumePreviewTUI(document_path, config).run()

"""Tests for the export utility module."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest
from pypdf import PdfReader

from resume_paginator.config import LayoutConfig
from resume_paginator.services.navigator import PageNavigator
from resume_paginator.services.pagination import (
    export_resume_pdf,
    paginate,
    render_resume_pdf,
)
from resume_paginator.utils.export import (
    ExportError,
    document_to_export_dict,
    export_to_json,
    export_to_pdf,
    render_pdf_bytes,
    resume_filename,
)


class TestResumeFilename:
    """Tests for resume_filename function."""

    def test_replaces_non_alphanumerics(self) -> None:
        assert resume_filename("Jane Doe - CV (2024)", "pdf") == "jane_doe___cv__2024_.pdf"

    def test_default_name(self) -> None:
        assert resume_filename(None, "json") == "resume.json"
        assert resume_filename("", "pdf") == "resume.pdf"


class TestRenderPdf:
    def test_produces_pdf_bytes(
        self, layout_config: LayoutConfig, sample_document: dict[str, Any]
    ) -> None:
        pages = paginate(sample_document, layout_config)

        data = render_pdf_bytes(pages, layout_config)

        assert data.startswith(b"%PDF")

    def test_one_pdf_page_per_resume_page(
        self, layout_config: LayoutConfig, long_document: dict[str, Any]
    ) -> None:
        data, page_count = render_resume_pdf(long_document, layout_config)
        reader = PdfReader(io.BytesIO(data))

        assert page_count > 2
        assert len(reader.pages) == page_count

    def test_fixed_page_size(
        self, layout_config: LayoutConfig, long_document: dict[str, Any]
    ) -> None:
        data, _ = render_resume_pdf(long_document, layout_config)
        reader = PdfReader(io.BytesIO(data))

        for page in reader.pages:
            assert float(page.mediabox.width) == pytest.approx(794 * 0.75)
            assert float(page.mediabox.height) == pytest.approx(1123 * 0.75)

    def test_footer_on_multi_page_documents(
        self, layout_config: LayoutConfig, long_document: dict[str, Any]
    ) -> None:
        data, page_count = render_resume_pdf(long_document, layout_config)
        reader = PdfReader(io.BytesIO(data))

        assert f"Page 1 of {page_count}" in reader.pages[0].extract_text()

    def test_empty_document_raises(self, layout_config: LayoutConfig) -> None:
        with pytest.raises(ExportError, match="No resume pages"):
            render_pdf_bytes([], layout_config)


class TestExportToPdf:
    def test_writes_file(
        self, tmp_path: Path, layout_config: LayoutConfig, sample_document: dict[str, Any]
    ) -> None:
        pages = paginate(sample_document, layout_config)
        output = tmp_path / "resume.pdf"

        result = export_to_pdf(pages, output, layout_config)

        assert result == output
        assert output.read_bytes().startswith(b"%PDF")

    def test_export_restores_navigator(
        self, tmp_path: Path, layout_config: LayoutConfig, long_document: dict[str, Any]
    ) -> None:
        navigator = PageNavigator()
        output = tmp_path / "resume.pdf"

        export_resume_pdf(long_document, output, layout_config, navigator=navigator)
        reader = PdfReader(output)

        assert len(reader.pages) == navigator.page_count
        assert not navigator.exporting
        assert navigator.visible_pages() == (navigator.pages[0],)


class TestJsonExport:
    def test_descriptions_are_plain_text(self, sample_document: dict[str, Any]) -> None:
        exported = document_to_export_dict(sample_document)

        description = exported["work_experience"][0]["description"]
        assert "<" not in description
        assert "Led the payments team." in description
        assert sample_document["work_experience"][0]["description"].startswith("<p>")

    def test_writes_file(self, tmp_path: Path, sample_document: dict[str, Any]) -> None:
        output = export_to_json(sample_document, tmp_path / "resume.json")

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["personal_info"]["full_name"] == "Jane Doe"
        assert data["work_experience"][1]["description"] == "Maintained the reporting pipeline."


class TestSkillText:
    def test_markdown_markers_in_skill_names_survive(self, layout_config: LayoutConfig) -> None:
        document = {
            "skills": [
                {"name": "__init__ hooks", "category": "Technical", "order": 0},
                {"name": "C--", "category": "Technical", "order": 1},
                {"name": "Bash --verbose-- flags", "category": "Tools", "order": 2},
                {"name": "**kwargs", "category": "Tools", "order": 3},
                {"name": r"C:\Users", "category": "Other", "order": 4},
            ]
        }

        data, _ = render_resume_pdf(document, layout_config)
        text = PdfReader(io.BytesIO(data)).pages[0].extract_text()

        assert "__init__ hooks" in text
        assert "C--" in text
        assert "Bash --verbose-- flags" in text
        assert "**kwargs" in text
        assert r"C:\Users" in text

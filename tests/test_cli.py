from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from resume_paginator.cli import main, run_cli


@pytest.fixture
def document_path(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


def test_paginate_prints_summary(document_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_cli(["paginate", str(document_path)]) == 0

    out = capsys.readouterr().out
    assert "Page 1:" in out
    assert "work_item#0" in out


def test_export_default_output(document_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_cli(["export", str(document_path)]) == 0

    output = document_path.with_name("jane_doe_resume.pdf")
    assert output.read_bytes().startswith(b"%PDF")
    assert "PDF exported" in capsys.readouterr().out


def test_export_adds_pdf_suffix(document_path: Path, tmp_path: Path) -> None:
    assert run_cli(["export", str(document_path), "-o", str(tmp_path / "out")]) == 0

    assert (tmp_path / "out.pdf").exists()


def test_export_empty_document_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")

    assert run_cli(["export", str(path)]) == 1
    assert "Export failed" in capsys.readouterr().out


def test_json_export(document_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "plain.json"

    assert run_cli(["json", str(document_path), "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["work_experience"][0]["description"].startswith("Led the payments team.")


def test_invalid_document(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[1, 2", encoding="utf-8")

    assert run_cli(["paginate", str(path)]) == 1
    assert "❌" in capsys.readouterr().out


def test_unknown_template_rejected(document_path: Path) -> None:
    with pytest.raises(SystemExit):
        run_cli(["paginate", str(document_path), "--template", "fancy"])


def test_keyboard_interrupt(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("resume_paginator.cli.run_cli", side_effect=KeyboardInterrupt):
        assert main(["paginate", "x.json"]) == 130

    assert "Interrupted" in capsys.readouterr().out


def test_json_default_output_never_overwrites_input(tmp_path: Path) -> None:
    path = tmp_path / "resume.json"
    original = {
        "work_experience": [{"position": "Engineer", "description": "<p>Hi <b>there</b></p>"}]
    }
    path.write_text(json.dumps(original), encoding="utf-8")

    assert main(["json", str(path)]) == 0

    assert json.loads(path.read_text(encoding="utf-8")) == original
    exported = json.loads((tmp_path / "resume_export.json").read_text(encoding="utf-8"))
    assert exported["work_experience"][0]["description"] == "Hi there"


def test_json_explicit_output_same_as_input_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "resume.json"
    path.write_text('{"title": "Resume"}', encoding="utf-8")

    assert run_cli(["json", str(path), "-o", str(path)]) == 1

    assert "Refusing to overwrite" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == '{"title": "Resume"}'


def test_export_next_to_input_named_like_output(tmp_path: Path) -> None:
    path = tmp_path / "resume.pdf"
    source = json.dumps({"work_experience": [{"position": "Engineer"}]})
    path.write_text(source, encoding="utf-8")

    assert run_cli(["export", str(path)]) == 0

    assert path.read_text(encoding="utf-8") == source
    assert (tmp_path / "resume_export.pdf").read_bytes().startswith(b"%PDF")


def test_invalid_layout_environment(
    document_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("RESUME_PAGE_HEIGHT", "tall")

    assert run_cli(["paginate", str(document_path)]) == 1

    out = capsys.readouterr().out
    assert "❌ Invalid layout configuration" in out
    assert "RESUME_PAGE_HEIGHT" in out

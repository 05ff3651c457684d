"""Load resume documents from JSON files or parsed mappings."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from pydantic import ValidationError

from resume_paginator.models.document import InvalidDocumentError, ResumeDocumentIn

if TYPE_CHECKING:
    from resume_paginator.services.resume_data import ResumeDocument

logger = logging.getLogger(__name__)

__all__ = ["document_from_model", "load_document_file", "parse_document"]


def document_from_model(model: ResumeDocumentIn) -> ResumeDocument:
    """Convert a validated input schema into the internal document contract."""
    return cast("ResumeDocument", model.model_dump(mode="json", exclude_none=True))


def parse_document(data: Mapping[str, Any]) -> ResumeDocument:
    """Validate *data* and return it as a :class:`ResumeDocument`.

    Raises:
        InvalidDocumentError: If *data* does not describe a resume.
    """
    if not isinstance(data, Mapping):
        raise InvalidDocumentError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        model = ResumeDocumentIn.model_validate(dict(data))
    except ValidationError as exc:
        logger.warning("Resume document failed validation: %s", exc)
        raise InvalidDocumentError(str(exc)) from exc
    return document_from_model(model)


def load_document_file(path: Path) -> ResumeDocument:
    """Read a resume document from a JSON file.

    Raises:
        InvalidDocumentError: If the file is missing, not JSON, or invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidDocumentError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidDocumentError(f"{path} is not valid JSON: {exc}") from exc

    return parse_document(data)

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from resume_paginator.config import LayoutConfig
from resume_paginator.constants.layout_constants import BlockKind
from resume_paginator.models.layout import Block

BUDGET = 977


def work(height: float, order: int, position: str | None = None) -> dict[str, Any]:
    """Work entry carrying the height the fake measurer reports for it."""
    return {
        "company_name": "Acme",
        "position": position or f"Engineer {order}",
        "start_date": "2020-01-01",
        "current": True,
        "description": "<p>Did things.</p>",
        "order": order,
        "height": height,
    }


def education(height: float, order: int) -> dict[str, Any]:
    return {
        "institution": "State University",
        "degree": "B.Sc.",
        "start_date": "2014-09-01",
        "end_date": "2018-06-01",
        "order": order,
        "height": height,
    }


def fake_measure(
    personal: float = 120,
    header: float = 40,
    skills_header: float = 40,
    skills_content: float = 100,
) -> Callable[[Block], float]:
    """Measurer reading item heights from their payload."""

    def measure(block: Block) -> float:
        if block.kind is BlockKind.PERSONAL_INFO:
            return personal
        if block.kind is BlockKind.SECTION_HEADER:
            return header
        if block.kind is BlockKind.SKILLS_HEADER:
            return skills_header
        if block.kind is BlockKind.SKILLS_CONTENT:
            return skills_content
        return block.payload["height"]

    return measure


@pytest.fixture
def layout_config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A realistic resume with every section populated."""
    return {
        "title": "Jane Doe Resume",
        "personal_info": {
            "full_name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "location": "Vancouver, BC",
            "summary": "Backend engineer with eight years of experience building APIs.",
        },
        "work_experience": [
            {
                "company_name": "Globex",
                "position": "Senior Engineer",
                "start_date": "2021-03-01",
                "current": True,
                "description": (
                    "<p>Led the payments team.</p>"
                    "<ul><li>Cut p99 latency by <strong>40%</strong></li>"
                    "<li>Mentored four engineers</li></ul>"
                ),
                "order": 1,
            },
            {
                "company_name": "Initech",
                "position": "Engineer",
                "start_date": "2017-06-01",
                "end_date": "2021-02-01",
                "current": False,
                "description": "<p>Maintained the reporting pipeline.</p>",
                "order": 0,
            },
        ],
        "education": [
            {
                "institution": "UBC",
                "degree": "B.Sc.",
                "field_of_study": "Computer Science",
                "start_date": "2013-09-01",
                "end_date": "2017-05-01",
                "current": False,
                "order": 0,
            }
        ],
        "skills": [
            {"name": "Python", "category": "Technical", "order": 0},
            {"name": "Teamwork", "category": "Soft Skills", "order": 1},
            {"name": "Go", "category": "Technical", "order": 2},
            {"name": "Docker", "category": "Tools", "order": 3},
        ],
    }


@pytest.fixture
def long_document(sample_document: dict[str, Any]) -> dict[str, Any]:
    """Enough work history to need several pages."""
    paragraph = (
        "Designed and shipped services handling millions of requests per day, "
        "coordinating with product and infrastructure teams across time zones."
    )
    items = []
    for order in range(12):
        bullets = "".join(f"<li>{paragraph}</li>" for _ in range(4))
        items.append(
            {
                "company_name": f"Company {order}",
                "position": f"Engineer {order}",
                "start_date": "2010-01-01",
                "end_date": "2011-01-01",
                "current": False,
                "description": f"<p>{paragraph}</p><ul>{bullets}</ul>",
                "order": order,
            }
        )
    return {**sample_document, "work_experience": items}

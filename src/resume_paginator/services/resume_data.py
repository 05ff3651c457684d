"""Data contracts for the resume document fed to the paginator.

These TypedDicts define the shape of data that flows from the loading
layer into block building, measurement and export.  Everything downstream
depends ONLY on these contracts (not on the pydantic input schemas) so the
loading logic can evolve independently.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "ResumeDocument",
    "ResumeEducationEntry",
    "ResumePersonalInfo",
    "ResumeSkillEntry",
    "ResumeWorkEntry",
    "SkillGroup",
]


class ResumePersonalInfo(TypedDict, total=False):
    """Name, contact links and summary shown at the top of page one."""

    full_name: str
    email: str
    phone: str
    location: str
    linkedin: str
    website: str
    summary: str


class ResumeWorkEntry(TypedDict, total=False):
    """A single work-experience record."""

    company_name: str
    position: str
    start_date: str  # ISO date string or human-readable
    end_date: str
    current: bool
    description: str  # rich text (HTML)
    order: int


class ResumeEducationEntry(TypedDict, total=False):
    """A single education record."""

    institution: str
    degree: str
    field_of_study: str
    start_date: str
    end_date: str
    current: bool
    description: str
    order: int


class ResumeSkillEntry(TypedDict, total=False):
    """A flat skill record."""

    name: str
    category: str
    order: int


class SkillGroup(TypedDict):
    """Skills sharing a category, in display order."""

    category: str
    names: list[str]


class ResumeDocument(TypedDict, total=False):
    """Top-level snapshot handed to ``pack()``."""

    title: str
    personal_info: ResumePersonalInfo
    work_experience: list[ResumeWorkEntry]
    education: list[ResumeEducationEntry]
    skills: list[ResumeSkillEntry]

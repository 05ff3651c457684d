"""Pydantic input schemas for resume documents.

Both snake_case and the camelCase keys sent by the browser client
(``fullName``, ``workExperience`` ...) are accepted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_paginator.constants.layout_constants import SkillCategory

__all__ = [
    "EducationIn",
    "InvalidDocumentError",
    "PersonalInfoIn",
    "ResumeDocumentIn",
    "SkillIn",
    "WorkExperienceIn",
]


class InvalidDocumentError(Exception):
    """Raised when a resume document cannot be loaded or validated."""


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfoIn(_CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    summary: str | None = None


class WorkExperienceIn(_CamelModel):
    company_name: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    description: str = ""
    order: int = 0


class EducationIn(_CamelModel):
    institution: str = ""
    degree: str = ""
    field_of_study: str | None = None
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    description: str | None = None
    order: int = 0


class SkillIn(_CamelModel):
    name: str = Field(min_length=1)
    category: SkillCategory = SkillCategory.OTHER
    order: int = 0


class ResumeDocumentIn(_CamelModel):
    """Complete resume snapshot as received from a client or file."""

    title: str = ""
    personal_info: PersonalInfoIn | None = None
    work_experience: list[WorkExperienceIn] = Field(default_factory=list)
    education: list[EducationIn] = Field(default_factory=list)
    skills: list[SkillIn] = Field(default_factory=list)

from __future__ import annotations

from resume_paginator.constants.layout_constants import (
    DEFAULT_FALLBACK_HEIGHTS,
    EDUCATION_SECTION_TITLE,
    SKILLS_SECTION_TITLE,
    WORK_SECTION_TITLE,
    BlockKind,
    SkillCategory,
)

__all__ = [
    "BlockKind",
    "DEFAULT_FALLBACK_HEIGHTS",
    "EDUCATION_SECTION_TITLE",
    "SKILLS_SECTION_TITLE",
    "SkillCategory",
    "WORK_SECTION_TITLE",
]

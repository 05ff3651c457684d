"""Derived category view over the flat skill list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from resume_paginator.constants.layout_constants import SkillCategory

if TYPE_CHECKING:
    from resume_paginator.services.resume_data import ResumeSkillEntry, SkillGroup

__all__ = ["group_skills"]


def group_skills(skills: Iterable[ResumeSkillEntry]) -> list[SkillGroup]:
    """Group skills by category.

    Skills are first sorted by ``order`` (stable); groups then appear in the
    order their category is first seen.  A missing category falls back to
    ``Other``.
    """
    ordered = sorted(skills, key=lambda skill: skill.get("order", 0))
    groups: dict[str, list[str]] = {}
    for skill in ordered:
        name = skill.get("name")
        if not name:
            continue
        category = skill.get("category") or SkillCategory.OTHER.value
        if isinstance(category, SkillCategory):
            category = category.value
        groups.setdefault(category, []).append(name)
    return [{"category": category, "names": names} for category, names in groups.items()]

"""Page geometry, block kinds and fallback heights used by the paginator.

All lengths are in CSS pixels (1/96 inch), the unit the preview renders in.
"""

from __future__ import annotations

from enum import Enum


class SkillCategory(str, Enum):
    """Fixed set of categories a skill can belong to."""

    TECHNICAL = "Technical"
    SOFT_SKILLS = "Soft Skills"
    LANGUAGES = "Languages"
    TOOLS = "Tools"
    OTHER = "Other"


class BlockKind(str, Enum):
    """Kinds of atomic layout units placed onto pages."""

    PERSONAL_INFO = "personal_info"
    SECTION_HEADER = "section_header"
    WORK_ITEM = "work_item"
    EDUCATION_ITEM = "education_item"
    SKILLS_HEADER = "skills_header"
    SKILLS_CONTENT = "skills_content"


# A4 at 96 DPI
A4_WIDTH = 794
A4_HEIGHT = 1123
PAGE_PADDING = 48

# Keeps measured content clear of the page border despite sub-pixel rounding.
SAFETY_MARGIN = 50

# Space left between the render box and the bottom border.
RENDER_CLEARANCE = 10

MAX_PREVIEW_ZOOM = 1.2

# Horizontal room reserved around the page when fitting the preview.
PREVIEW_CONTAINER_MARGIN = 40

# 1 CSS pixel expressed in PDF points.
PX_TO_PT = 0.75

WORK_SECTION_TITLE = "Work Experience"
EDUCATION_SECTION_TITLE = "Education"
SKILLS_SECTION_TITLE = "Skills"

DEFAULT_FALLBACK_HEIGHTS: dict[BlockKind, float] = {
    BlockKind.PERSONAL_INFO: 120,
    BlockKind.SECTION_HEADER: 40,
    BlockKind.WORK_ITEM: 100,
    BlockKind.EDUCATION_ITEM: 80,
    BlockKind.SKILLS_HEADER: 40,
    BlockKind.SKILLS_CONTENT: 100,
}

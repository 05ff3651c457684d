from __future__ import annotations

import pytest

from resume_paginator.config import LayoutConfig, load_layout_config
from resume_paginator.constants.layout_constants import BlockKind


class TestLayoutConfig:
    def test_a4_defaults(self) -> None:
        config = LayoutConfig()

        assert config.content_width == 698
        assert config.content_height == 1027
        assert config.safe_content_height == 977
        assert config.render_height == 1017
        assert config.keep_header_with_first_item is True

    def test_fallback_heights(self) -> None:
        fallbacks = LayoutConfig().fallback_heights

        assert fallbacks[BlockKind.PERSONAL_INFO] == 120
        assert fallbacks[BlockKind.SECTION_HEADER] == 40
        assert fallbacks[BlockKind.WORK_ITEM] == 100
        assert fallbacks[BlockKind.EDUCATION_ITEM] == 80
        assert fallbacks[BlockKind.SKILLS_HEADER] == 40
        assert fallbacks[BlockKind.SKILLS_CONTENT] == 100

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"page_height": 0},
            {"padding": -1},
            {"padding": 400},
            {"safety_margin": 2000},
            {"max_zoom": 0},
            {"fallback_heights": {BlockKind.WORK_ITEM: 100}},
        ],
    )
    def test_rejects_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)


class TestLoadLayoutConfig:
    def test_defaults_without_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "RESUME_PAGE_WIDTH",
            "RESUME_PAGE_HEIGHT",
            "RESUME_PAGE_PADDING",
            "RESUME_SAFETY_MARGIN",
            "RESUME_MAX_ZOOM",
            "RESUME_KEEP_HEADER_WITH_ITEM",
        ):
            monkeypatch.delenv(name, raising=False)

        assert load_layout_config() == LayoutConfig()

    def test_letter_page_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESUME_PAGE_WIDTH", "816")
        monkeypatch.setenv("RESUME_PAGE_HEIGHT", "1056")

        config = load_layout_config()

        assert config.page_width == 816
        assert config.safe_content_height == 1056 - 96 - 50

    @pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("YES", True)])
    def test_header_rule_override(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        monkeypatch.setenv("RESUME_KEEP_HEADER_WITH_ITEM", raw)

        assert load_layout_config().keep_header_with_first_item is expected

    def test_invalid_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESUME_SAFETY_MARGIN", "lots")

        with pytest.raises(ValueError, match="RESUME_SAFETY_MARGIN"):
            load_layout_config()

    def test_invalid_boolean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESUME_KEEP_HEADER_WITH_ITEM", "maybe")

        with pytest.raises(ValueError, match="boolean"):
            load_layout_config()

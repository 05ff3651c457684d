from __future__ import annotations

import pytest

from resume_paginator.config import LayoutConfig
from resume_paginator.constants.layout_constants import BlockKind
from resume_paginator.models.layout import Block, Page, PlacedBlock
from resume_paginator.services.navigator import PageNavigator, fit_scale


def make_pages(count: int) -> list[Page]:
    return [
        Page(entries=(PlacedBlock(Block.create(BlockKind.WORK_ITEM, i), 100.0),))
        for i in range(count)
    ]


class TestNavigation:
    def test_starts_on_first_page(self) -> None:
        nav = PageNavigator(make_pages(3))

        assert nav.index == 0
        assert nav.label == "Page 1 of 3"
        assert not nav.can_go_back
        assert nav.can_go_forward

    def test_next_and_previous_clamp(self) -> None:
        nav = PageNavigator(make_pages(2))

        assert nav.next() == 1
        assert nav.next() == 1
        assert nav.previous() == 0
        assert nav.previous() == 0

    def test_first_and_last(self) -> None:
        nav = PageNavigator(make_pages(4))

        assert nav.last() == 3
        assert nav.current_page is nav.pages[3]
        assert nav.first() == 0

    @pytest.mark.parametrize(("target", "expected"), [(-3, 0), (2, 2), (99, 4)])
    def test_go_to_clamps(self, target: int, expected: int) -> None:
        nav = PageNavigator(make_pages(5))

        assert nav.go_to(target) == expected

    def test_empty(self) -> None:
        nav = PageNavigator()

        assert nav.current_page is None
        assert nav.label == "No pages"
        assert nav.next() == 0
        assert nav.visible_pages() == ()

    def test_update_keeps_valid_index(self) -> None:
        nav = PageNavigator(make_pages(3))
        nav.go_to(1)

        nav.update(make_pages(4))

        assert nav.index == 1

    def test_update_resets_out_of_range_index(self) -> None:
        nav = PageNavigator(make_pages(5))
        nav.last()

        nav.update(make_pages(2))

        assert nav.index == 0
        assert nav.current_page is nav.pages[0]


class TestControlsVisibility:
    @pytest.mark.parametrize(
        ("count", "navigation", "quick_jump"),
        [(0, False, False), (1, False, False), (2, True, False), (3, True, True)],
    )
    def test_controls_by_page_count(self, count: int, navigation: bool, quick_jump: bool) -> None:
        nav = PageNavigator(make_pages(count))

        assert nav.show_navigation is navigation
        assert nav.show_quick_jump is quick_jump


class TestExportMode:
    def test_shows_single_page_normally(self) -> None:
        nav = PageNavigator(make_pages(3))
        nav.go_to(2)

        assert nav.visible_pages() == (nav.pages[2],)

    def test_exporting_shows_every_page_and_restores(self) -> None:
        nav = PageNavigator(make_pages(3))
        nav.go_to(1)

        with nav.exporting_all() as visible:
            assert visible == nav.pages
            assert nav.exporting
            assert not nav.show_navigation

        assert not nav.exporting
        assert nav.index == 1
        assert nav.visible_pages() == (nav.pages[1],)

    def test_export_mode_restored_after_failure(self) -> None:
        nav = PageNavigator(make_pages(2))

        with pytest.raises(RuntimeError), nav.exporting_all():
            raise RuntimeError("disk full")

        assert not nav.exporting


class TestZoom:
    def test_fit_scale_fills_container(self) -> None:
        assert fit_scale(437, 794, 1.2) == pytest.approx(0.5)

    def test_fit_scale_capped(self) -> None:
        assert fit_scale(5000, 794, 1.2) == 1.2

    def test_fit_scale_never_negative(self) -> None:
        assert fit_scale(10, 794, 1.2) == 0.0

    def test_caption(self) -> None:
        nav = PageNavigator(make_pages(2))
        nav.fit_to(437, LayoutConfig())

        assert nav.caption == "Preview: 50% • 2 pages"

    def test_caption_single_page(self) -> None:
        assert PageNavigator(make_pages(1)).caption == "Preview: 100% • 1 page"

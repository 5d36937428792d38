"""Unit tests for the monitor layout."""

import pytest

from simscope.core.layout import (
    FOOTER_HEIGHT,
    MAX_PLOT_HEIGHT,
    MAX_ROW_HEIGHT,
    MIN_ROW_HEIGHT,
    SUMMARY_HEIGHT,
    SUMMARY_HEIGHT_SPLIT,
    compute_layout,
    group_row_height,
    raw_row_height,
)


class TestRowHeight:
    @pytest.mark.parametrize("available,groups,expected", [
        (100, 9, 10),
        (95, 9, 9),
        (80, 9, 8),
    ])
    def test_floor_of_share(self, available, groups, expected):
        assert group_row_height(available, groups) == expected

    def test_capped(self):
        assert group_row_height(500, 2) == MAX_ROW_HEIGHT

    def test_below_legibility_floor(self):
        assert raw_row_height(100, 19) == 5
        assert group_row_height(100, 19) == 0

    def test_never_above_cap(self):
        for groups in range(0, 200):
            assert group_row_height(1000, groups) <= MAX_ROW_HEIGHT


class TestComputeLayout:
    def test_wide_canvas_regions(self):
        layout = compute_layout(1200, 600, group_count=3)

        assert not layout.split_summary
        assert layout.summary.h == SUMMARY_HEIGHT
        assert layout.footer.y == 600 - FOOTER_HEIGHT
        assert len(layout.plots) == 3
        assert layout.plots[0].w == pytest.approx((1200 - 20) * 0.25)
        assert all(p.h <= MAX_PLOT_HEIGHT for p in layout.plots)
        assert layout.groups.area.x > layout.plots[0].right
        assert layout.groups.row_height == MAX_ROW_HEIGHT
        assert len(layout.groups.rows) == 3

    def test_narrow_canvas_splits_summary(self):
        layout = compute_layout(800, 600, group_count=1)
        assert layout.split_summary
        assert layout.summary.h == SUMMARY_HEIGHT_SPLIT

    def test_plots_take_full_width_without_groups(self):
        layout = compute_layout(1200, 600, group_count=3, show_groups=False)

        assert layout.groups is None
        assert layout.plots[0].w == pytest.approx(1180)

    def test_groups_take_full_width_without_plots(self):
        layout = compute_layout(1200, 600, group_count=3, show_plots=False)

        assert layout.plots == []
        assert layout.groups.area.x == pytest.approx(6)

    def test_rows_stack_below_scale(self):
        layout = compute_layout(1200, 600, group_count=2)
        groups = layout.groups

        assert groups.scale.y == layout.summary.bottom
        assert groups.rows[0].y == groups.scale.bottom
        assert groups.rows[1].y == groups.rows[0].bottom

    def test_rows_fit_available_height(self):
        layout = compute_layout(1200, 400, group_count=30)
        groups = layout.groups
        available = layout.footer.y - layout.summary.bottom

        assert not groups.overflow
        assert groups.row_height == int(available // 31)
        assert groups.rows[-1].bottom <= layout.footer.y

    def test_overflow_when_rows_too_small(self):
        layout = compute_layout(1200, 400, group_count=200)

        assert layout.groups.overflow
        assert layout.groups.rows == []
        assert layout.groups.row_height < MIN_ROW_HEIGHT

    def test_tiny_canvas_does_not_go_negative(self):
        layout = compute_layout(10, 10, group_count=1)

        assert all(p.h >= 0 and p.w >= 0 for p in layout.plots)
        assert layout.groups.area.w >= 0
        assert layout.groups.overflow

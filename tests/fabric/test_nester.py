"""Tests for fabric.nester — packing_order, layout_panels, GreedyRowNester."""

from __future__ import annotations

import warnings

import pytest

from skirtplan.errors import InvalidAllowance, InvalidFabricWidth
from skirtplan.fabric import FabricNester, GreedyRowNester, layout_panels, packing_order
from skirtplan.planner.panels import build_panel
from skirtplan.schemas.layout import FabricLayout, Rotation

# ── Shared helpers ─────────────────────────────────────────────────────────────


def _panel(index: int, hem: float = 30.0, height: float = 60.0, waist: float = 20.0):
    return build_panel(index, waist, hem, height)


def _four_equal():
    return [_panel(i) for i in range(1, 5)]


def _mixed():
    """Eight panels of varied width and height, listed in circumference order."""
    sizes = [(22, 55), (41, 60), (35, 58), (18, 40), (41, 62), (27, 50), (33, 61), (12, 30)]
    return [_panel(i + 1, hem=h, height=ht) for i, (h, ht) in enumerate(sizes)]


# ── packing_order ──────────────────────────────────────────────────────────────


class TestPackingOrder:
    def test_widest_hem_first(self):
        order = packing_order([_panel(1, hem=20), _panel(2, hem=50), _panel(3, hem=35)])
        assert [p.index for p in order] == [2, 3, 1]

    def test_ties_by_index(self):
        order = packing_order([_panel(3), _panel(1), _panel(2)])
        assert [p.index for p in order] == [1, 2, 3]

    def test_independent_of_input_order(self):
        panels = _mixed()
        assert packing_order(panels) == packing_order(list(reversed(panels)))

    def test_sorts_on_seam_inclusive_hem(self):
        wide_raw = build_panel(1, 20.0, 40.0, 60.0)
        wide_seam = build_panel(2, 20.0, 38.0, 60.0, side_seam_allowance=2.0)
        assert [p.index for p in packing_order([wide_raw, wide_seam])] == [2, 1]


# ── layout_panels ──────────────────────────────────────────────────────────────


class TestLayoutPanels:
    def test_four_panel_scenario(self):
        layout = layout_panels(_four_equal(), fabric_width=100, cut_allowance=2)
        coords = [(p.panel.index, p.x, p.y, p.row) for p in layout.placements]
        assert coords == [
            (1, 0.0, 0.0, 0),
            (2, 32.0, 0.0, 0),
            (3, 64.0, 0.0, 0),
            (4, 0.0, 62.0, 1),
        ]
        assert layout.required_length == 122
        assert [len(row) for row in layout.rows()] == [3, 1]

    def test_returns_fabric_layout(self):
        layout = layout_panels(_four_equal(), 100)
        assert isinstance(layout, FabricLayout)
        assert layout.fabric_width == 100
        assert layout.cut_allowance == 0

    def test_rotation_alternates(self):
        layout = layout_panels(_four_equal(), 100, 2)
        assert [p.rotation for p in layout.placements] == [
            Rotation.UPRIGHT,
            Rotation.INVERTED,
            Rotation.UPRIGHT,
            Rotation.INVERTED,
        ]

    def test_rotation_does_not_change_packing(self):
        layout = layout_panels(_four_equal(), 100, 2)
        assert layout.placements[1].width == layout.placements[0].width

    def test_empty(self):
        layout = layout_panels([], 100, 2)
        assert layout.placements == ()
        assert layout.required_length == 0

    def test_single_row_without_allowance(self):
        layout = layout_panels(_four_equal(), 120)
        assert layout.row_count == 1
        assert layout.required_length == 60

    def test_final_row_has_no_trailing_allowance(self):
        layout = layout_panels([_panel(1), _panel(2)], 30, 5)
        assert [p.y for p in layout.placements] == [0.0, 65.0]
        assert layout.required_length == 125

    def test_row_height_is_tallest_panel(self):
        panels = [_panel(1, height=40), _panel(2, height=70), _panel(3, height=50)]
        layout = layout_panels(panels, 65)
        assert layout.placements[2].y == 70
        assert layout.required_length == 120

    def test_allowance_counts_after_panel(self):
        # 30 + 30 fits exactly in 60 but not with a gap of 1 after the second panel
        assert layout_panels([_panel(1), _panel(2)], 60).row_count == 1
        assert layout_panels([_panel(1), _panel(2)], 60, 1).row_count == 2

    def test_uses_bounding_width_for_tapered_panels(self):
        # hem 10 would fit beside the 40 cm panel; the 50 cm waist does not
        tapered = build_panel(1, 50.0, 10.0, 30.0)
        layout = layout_panels([tapered, _panel(2, hem=40)], 80)
        assert [p.panel.index for p in layout.placements] == [2, 1]
        assert layout.placements[1].row == 1
        assert layout.placements[1].x == 0.0

    @pytest.mark.parametrize("width", [0, -10, float("inf"), float("nan")])
    def test_rejects_invalid_width(self, width):
        with pytest.raises(InvalidFabricWidth):
            layout_panels(_four_equal(), width)

    def test_rejects_negative_allowance(self):
        with pytest.raises(InvalidAllowance, match="cut_allowance"):
            layout_panels(_four_equal(), 100, -1)

    @pytest.mark.parametrize("allowance", [float("nan"), float("inf")])
    def test_rejects_non_finite_allowance(self, allowance):
        with pytest.raises(InvalidAllowance, match="cut_allowance"):
            layout_panels(_four_equal(), 100, allowance)


class TestOversizePanel:
    def test_placed_alone_and_warned(self):
        panels = [_panel(1), _panel(2, hem=120), _panel(3)]
        with pytest.warns(UserWarning, match="Panel 2 .* wider than"):
            layout = layout_panels(panels, 100)
        rows = layout.rows()
        assert [p.panel.index for p in rows[0]] == [2]
        assert [p.panel.index for p in rows[1]] == [1, 3]
        assert layout.overflowing == (2,)

    def test_warning_points_at_caller(self):
        with pytest.warns(UserWarning) as record:
            layout_panels([_panel(1, hem=120)], 100)
        assert record[0].filename == __file__

    def test_nester_warning_points_at_caller(self):
        with pytest.warns(UserWarning) as record:
            GreedyRowNester().layout([_panel(1, hem=120)], 100)
        assert record[0].filename == __file__

    def test_no_warning_when_everything_fits(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            layout = layout_panels(_four_equal(), 100, 2)
        assert layout.overflowing == ()


# ── Layout properties ──────────────────────────────────────────────────────────


class TestLayoutProperties:
    @pytest.mark.parametrize("fabric_width", [45.0, 90.0, 112.0, 140.0, 150.0])
    @pytest.mark.parametrize("cut_allowance", [0.0, 1.0, 2.5])
    def test_placements_stay_within_width(self, fabric_width, cut_allowance):
        layout = layout_panels(_mixed(), fabric_width, cut_allowance)
        for p in layout.placements:
            assert p.right_edge <= fabric_width

    @pytest.mark.parametrize("fabric_width", [45.0, 90.0, 140.0])
    def test_required_length_covers_every_panel(self, fabric_width):
        layout = layout_panels(_mixed(), fabric_width, 1.5)
        assert all(p.bottom_edge <= layout.required_length for p in layout.placements)
        assert layout.required_length == pytest.approx(max(p.bottom_edge for p in layout.placements))

    @pytest.mark.parametrize("fabric_width", [45.0, 90.0, 140.0])
    def test_panels_in_a_row_do_not_overlap(self, fabric_width):
        layout = layout_panels(_mixed(), fabric_width, 1.0)
        for row in layout.rows():
            for left, right in zip(row, row[1:]):
                assert left.right_edge + layout.cut_allowance <= right.x + 1e-9

    @pytest.mark.parametrize("fabric_width", [45.0, 90.0, 140.0])
    def test_required_length_grows_with_panel_count(self, fabric_width):
        ordered = packing_order(_mixed())
        lengths = [
            layout_panels(ordered[:k], fabric_width, 2.0).required_length
            for k in range(len(ordered) + 1)
        ]
        assert lengths == sorted(lengths)

    def test_idempotent(self):
        first = layout_panels(_mixed(), 90.0, 2.0)
        second = layout_panels(_mixed(), 90.0, 2.0)
        assert first == second

    def test_input_order_does_not_matter(self):
        panels = _mixed()
        assert layout_panels(panels, 90.0, 2.0) == layout_panels(panels[::-1], 90.0, 2.0)

    def test_every_panel_placed_once(self):
        layout = layout_panels(_mixed(), 60.0, 1.0)
        assert sorted(p.panel.index for p in layout.placements) == list(range(1, 9))


# ── GreedyRowNester ────────────────────────────────────────────────────────────


class TestGreedyRowNester:
    def test_satisfies_protocol(self):
        assert isinstance(GreedyRowNester(), FabricNester)

    def test_matches_layout_panels(self):
        assert GreedyRowNester().layout(_four_equal(), 100, 2) == layout_panels(
            _four_equal(), 100, 2
        )

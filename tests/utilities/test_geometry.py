"""Tests for trapezoid outline geometry."""

from __future__ import annotations

import pytest

from skirtplan.planner.panels import build_panel
from skirtplan.schemas.layout import LayoutPlacement, Rotation
from skirtplan.utilities.geometry import (
    bounding_box,
    panel_outline,
    placement_outline,
    rotate_half_turn,
)

# ── Shared helpers ─────────────────────────────────────────────────────────────


def _flared():
    """Waist 20 wide, hem 40 wide, 50 tall (no allowances)."""
    return build_panel(1, 20.0, 40.0, 50.0)


def _tapered():
    """Waist wider than hem: 30 at the waist, 10 at the hem."""
    return build_panel(2, 30.0, 10.0, 20.0)


class TestPanelOutline:
    def test_flared_corners(self):
        assert panel_outline(_flared()) == (
            (10.0, 0.0),
            (30.0, 0.0),
            (40.0, 50.0),
            (0.0, 50.0),
        )

    def test_tapered_corners(self):
        assert panel_outline(_tapered()) == (
            (0.0, 0.0),
            (30.0, 0.0),
            (20.0, 20.0),
            (10.0, 20.0),
        )

    def test_rectangle(self):
        panel = build_panel(1, 25.0, 25.0, 60.0)
        assert panel_outline(panel) == ((0.0, 0.0), (25.0, 0.0), (25.0, 60.0), (0.0, 60.0))

    def test_uses_seam_inclusive_sizes(self):
        panel = build_panel(1, 20.0, 40.0, 50.0, 1.0, 2.0, 3.0)
        assert bounding_box(panel_outline(panel)) == (0.0, 0.0, 44.0, 54.0)

    def test_fills_bounding_box(self):
        panel = _flared()
        min_x, min_y, max_x, max_y = bounding_box(panel_outline(panel))
        assert (min_x, min_y) == (0.0, 0.0)
        assert max_x == pytest.approx(panel.bounding_width)
        assert max_y == pytest.approx(panel.height_with_seam)


class TestRotateHalfTurn:
    def test_about_origin(self):
        assert rotate_half_turn((3.0, 4.0), (0.0, 0.0)) == (-3.0, -4.0)

    def test_centre_is_fixed(self):
        assert rotate_half_turn((5.0, 5.0), (5.0, 5.0)) == (5.0, 5.0)

    def test_twice_is_identity(self):
        centre = (2.5, 7.0)
        point = (1.0, 9.0)
        assert rotate_half_turn(rotate_half_turn(point, centre), centre) == point


class TestPlacementOutline:
    def test_upright_is_translated(self):
        placement = LayoutPlacement(panel=_flared(), x=100.0, y=10.0, row=0)
        assert placement_outline(placement) == (
            (110.0, 10.0),
            (130.0, 10.0),
            (140.0, 60.0),
            (100.0, 60.0),
        )

    def test_inverted_puts_hem_on_top(self):
        placement = LayoutPlacement(
            panel=_flared(), x=0.0, y=0.0, row=0, rotation=Rotation.INVERTED
        )
        waist_left, waist_right, hem_right, hem_left = placement_outline(placement)
        assert waist_left == (30.0, 50.0)
        assert waist_right == (10.0, 50.0)
        assert hem_right == (0.0, 0.0)
        assert hem_left == (40.0, 0.0)

    def test_inverted_stays_in_bounding_box(self):
        placement = LayoutPlacement(
            panel=_tapered(), x=12.0, y=34.0, row=1, rotation=Rotation.INVERTED
        )
        assert bounding_box(placement_outline(placement)) == pytest.approx(
            (12.0, 34.0, placement.right_edge, placement.bottom_edge)
        )

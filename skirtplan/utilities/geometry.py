"""
Trapezoid outline geometry for panels and their placements on the fabric.

An upright panel is drawn inside its bounding box with the waist edge on top
(y = 0) and the hem edge at the bottom (y = height_with_seam), both edges
centred horizontally.  An inverted placement is the same outline rotated
180° about the bounding-box centre, which puts the hem edge on top.

Corner order is always waist-left, waist-right, hem-right, hem-left as seen
on the upright panel, so a consumer can tell the edges apart after rotation.
"""

from __future__ import annotations

from skirtplan.schemas.layout import LayoutPlacement
from skirtplan.schemas.panel import Panel

Point = tuple[float, float]


def panel_outline(panel: Panel) -> tuple[Point, Point, Point, Point]:
    """Corners of the upright seam-inclusive trapezoid, relative to its bounding box."""
    box_width = panel.bounding_width
    waist_left = (box_width - panel.waist_width_with_seam) / 2
    hem_left = (box_width - panel.hem_width_with_seam) / 2
    height = panel.height_with_seam
    return (
        (waist_left, 0.0),
        (waist_left + panel.waist_width_with_seam, 0.0),
        (hem_left + panel.hem_width_with_seam, height),
        (hem_left, height),
    )


def rotate_half_turn(point: Point, centre: Point) -> Point:
    """Rotate *point* by 180° about *centre*."""
    return (2 * centre[0] - point[0], 2 * centre[1] - point[1])


def placement_outline(placement: LayoutPlacement) -> tuple[Point, Point, Point, Point]:
    """Corners of a placed panel in fabric coordinates, with its rotation applied."""
    local = panel_outline(placement.panel)
    if placement.rotated:
        centre = (placement.width / 2, placement.height / 2)
        local = tuple(rotate_half_turn(p, centre) for p in local)  # type: ignore[assignment]
    return tuple((placement.x + px, placement.y + py) for px, py in local)  # type: ignore[return-value]


def bounding_box(points: tuple[Point, ...]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) of *points*."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)

"""
Layout schema: panels placed on a bolt of fabric.

Fabric coordinates put the origin at the top-left corner of the bolt, ``x``
running across the fabric width and ``y`` running down its length.  Every
placement is described by the top-left corner of its panel's bounding box.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from skirtplan.schemas.panel import Panel


class Rotation(int, Enum):
    """Orientation of a placed panel, in degrees about its bounding-box centre."""

    UPRIGHT = 0
    INVERTED = 180


@dataclass(frozen=True)
class LayoutPlacement:
    """
    One panel positioned on the fabric.

    Rotation only affects how the panel is drawn and cut; ``width`` and
    ``height`` are the same for both orientations.

    Attributes:
        panel: The placed panel.
        x: Distance from the left selvedge to the bounding box, in cm.
        y: Distance from the top of the cut to the bounding box, in cm.
        row: 0-based row the panel was packed into.
        rotation: UPRIGHT (waist on top) or INVERTED (hem on top).
    """

    panel: Panel
    x: float
    y: float
    row: int
    rotation: Rotation = Rotation.UPRIGHT

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")
        if self.row < 0:
            raise ValueError(f"row must be non-negative, got {self.row}")

    @property
    def width(self) -> float:
        return self.panel.bounding_width

    @property
    def height(self) -> float:
        return self.panel.height_with_seam

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        return self.y + self.height

    @property
    def rotated(self) -> bool:
        return self.rotation is Rotation.INVERTED


@dataclass(frozen=True)
class FabricLayout:
    """
    Result of packing a skirt's panels onto a fixed-width fabric.

    Attributes:
        placements: Placements in packing order (widest hem first).
        required_length: Total fabric length needed, in cm.
        fabric_width: Usable width of the fabric the layout was packed into.
        cut_allowance: Spacing kept between neighbouring panels and rows.
    """

    placements: tuple[LayoutPlacement, ...]
    required_length: float
    fabric_width: float
    cut_allowance: float

    @property
    def row_count(self) -> int:
        if not self.placements:
            return 0
        return max(p.row for p in self.placements) + 1

    def rows(self) -> list[tuple[LayoutPlacement, ...]]:
        """Group placements by row, preserving packing order within each row."""
        grouped: list[list[LayoutPlacement]] = [[] for _ in range(self.row_count)]
        for placement in self.placements:
            grouped[placement.row].append(placement)
        return [tuple(row) for row in grouped]

    @property
    def used_area(self) -> float:
        """Total trapezoid area of all placed panels, in cm²."""
        return sum(p.panel.area for p in self.placements)

    @property
    def utilization(self) -> float:
        """Fraction of the consumed fabric rectangle covered by panels."""
        consumed = self.fabric_width * self.required_length
        if consumed == 0:
            return 0.0
        return self.used_area / consumed

    @property
    def overflowing(self) -> tuple[int, ...]:
        """Indices of panels whose bounding box is wider than the fabric."""
        return tuple(p.panel.index for p in self.placements if p.width > self.fabric_width)

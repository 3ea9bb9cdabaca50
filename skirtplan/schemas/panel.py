"""
Panel schema: one fully dimensioned trapezoidal fabric piece.

A Panel is created fresh on every recompute and never mutated.  The ordered
tuple of Panels for a skirt is the unit consumed by the FabricNester and the
writers.  Anything a particular view needs (scale factors, rotation, outline
coordinates) is derived from a Panel, never stored on it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Panel:
    """
    A trapezoidal skirt panel with raw and seam-inclusive dimensions (cm).

    Attributes:
        index: 1-based position of the panel around the skirt.
        waist_width: Finished width along the waist edge.
        hem_width: Finished width along the hem edge.
        height: Finished waist-to-hem length.
        waist_width_with_seam: waist_width + 2 × side allowance.
        hem_width_with_seam: hem_width + 2 × side allowance.
        height_with_seam: height + waist allowance + hem allowance.
    """

    index: int
    waist_width: float
    hem_width: float
    height: float
    waist_width_with_seam: float
    hem_width_with_seam: float
    height_with_seam: float

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"index must be >= 1, got {self.index}")
        # Two coincident split points legitimately produce a zero-width edge.
        if self.waist_width < 0:
            raise ValueError(f"waist_width must be non-negative, got {self.waist_width}")
        if self.hem_width < 0:
            raise ValueError(f"hem_width must be non-negative, got {self.hem_width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")

    @property
    def bounding_width(self) -> float:
        """Width of the trapezoid's bounding box: the wider of its two edges."""
        return max(self.waist_width_with_seam, self.hem_width_with_seam)

    @property
    def area(self) -> float:
        """Seam-inclusive trapezoid area in cm²."""
        return (self.waist_width_with_seam + self.hem_width_with_seam) / 2 * self.height_with_seam

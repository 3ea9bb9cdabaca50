"""
CutPlan schema: how many whole lengths of a fixed fabric cut make up a wanted length.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CutPlan:
    """
    Straight-cut breakdown of a wanted length into whole fabric lengths.

    Attributes:
        fabric_length: Length of one available fabric cut, in cm.
        wanted_length: Finished length the maker needs, in cm.
        seam_allowance: Allowance added to each end of the wanted length.
        total_wanted: wanted_length + 2 × seam_allowance.
        cuts: total_wanted / fabric_length (fractional).
        full_cuts: Whole fabric lengths used, floor(cuts).
        remainder: Length of the final partial piece (0 when none is needed).
        pieces: Every piece in cutting order: full_cuts × fabric_length,
            then the remainder if it is positive.
    """

    fabric_length: float
    wanted_length: float
    seam_allowance: float
    total_wanted: float
    cuts: float
    full_cuts: int
    remainder: float
    pieces: tuple[float, ...]

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

"""
Shared utilities for the skirt panel calculator.

Provides the pure arithmetic used by the Planner and the Fabric Nester:
circumference partitioning at split ratios and trapezoid outline geometry.
"""

from .geometry import bounding_box, panel_outline, placement_outline, rotate_half_turn
from .partition import check_split_ratios, clamp_and_sort, default_split_ratios, partition

__all__ = [
    # partition
    "default_split_ratios",
    "check_split_ratios",
    "clamp_and_sort",
    "partition",
    # geometry
    "panel_outline",
    "placement_outline",
    "rotate_half_turn",
    "bounding_box",
]

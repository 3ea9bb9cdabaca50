"""
Input validation: fail-fast checks run before any calculator stage.

Every check raises a SkirtInputError subclass describing the first problem
found.  No partial computation happens on invalid input; the API layer
turns the exception into a single user-facing message.
"""

from __future__ import annotations

import math
from dataclasses import replace

from skirtplan.errors import (
    InvalidAllowance,
    InvalidFabricWidth,
    InvalidMeasurement,
    InvalidPanelCount,
)
from skirtplan.schemas.measurements import SkirtMeasurements


def require_positive(value: float | None, field: str) -> float:
    """Return *value* as a float, or raise InvalidMeasurement unless it is finite and > 0."""
    if value is None:
        raise InvalidMeasurement(field, "is required")
    if not math.isfinite(value) or value <= 0:
        raise InvalidMeasurement(field, f"must be positive, got {value}")
    return float(value)


def require_allowance(value: float | None, field: str) -> float:
    """Return *value* as a float, or raise InvalidAllowance unless it is a finite number >= 0."""
    if value is None or not math.isfinite(value) or value < 0:
        raise InvalidAllowance(field, f"must be non-negative, got {value}")
    return float(value)


def normalize_panel_count(panel_count: float | None) -> int:
    """
    Truncate *panel_count* towards zero and check it is at least 1.

    Non-integer counts are truncated, not rejected (4.7 → 4).

    Raises:
        InvalidPanelCount: If the count is missing, not finite, or < 1 after truncation.
    """
    if panel_count is None or not math.isfinite(panel_count):
        raise InvalidPanelCount("panel_count", f"must be a finite number, got {panel_count}")
    count = math.trunc(panel_count)
    if count < 1:
        raise InvalidPanelCount("panel_count", f"must be >= 1, got {panel_count}")
    return count


def validate_measurements(measurements: SkirtMeasurements) -> SkirtMeasurements:
    """
    Check a measurement set and return a normalised copy.

    The returned copy has float circumferences/length and an integer panel
    count, ready for the partition and panel stages.

    Raises:
        InvalidMeasurement: If a circumference or the skirt length is missing or <= 0.
        InvalidPanelCount: If the panel count is < 1 after truncation.
    """
    waist = require_positive(measurements.waist_circumference, "waist_circumference")
    hem = require_positive(measurements.hem_circumference, "hem_circumference")
    length = require_positive(measurements.skirt_length, "skirt_length")
    count = normalize_panel_count(measurements.panel_count)
    return replace(
        measurements,
        waist_circumference=waist,
        hem_circumference=hem,
        skirt_length=length,
        panel_count=count,
    )


def validate_fabric_width(fabric_width: float | None) -> float:
    """
    Check the fabric width used for layout.

    Raises:
        InvalidFabricWidth: If the width is missing, not finite, or <= 0.
    """
    if fabric_width is None or not math.isfinite(fabric_width) or fabric_width <= 0:
        raise InvalidFabricWidth("fabric_width", f"must be positive, got {fabric_width}")
    return float(fabric_width)

"""
Measurement schema: the raw numbers a garment maker types into the calculator.

Circumferences and lengths may be ``None`` while the form is still being
filled in.  Positivity is checked by the validator, not here, so
a half-entered measurement set can still be held in a CalculatorSession.
Seam allowances are the exception: a negative allowance is never meaningful,
so SeamAllowances rejects it at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from skirtplan.errors import InvalidAllowance

DEFAULT_PANEL_COUNT: int = 4


@dataclass(frozen=True)
class SeamAllowances:
    """
    Extra material added beyond each finished edge, in cm.

    Attributes:
        waist: Added once to panel height at the waist edge.
        side: Added to *each* side edge, so twice to every panel width.
        hem: Added once to panel height at the hem edge.
    """

    waist: float = 0.0
    side: float = 0.0
    hem: float = 0.0

    def __post_init__(self) -> None:
        for name in ("waist", "side", "hem"):
            value = getattr(self, name)
            if value is None or not math.isfinite(value) or value < 0:
                raise InvalidAllowance(
                    f"{name}_seam_allowance", f"must be non-negative, got {value}"
                )


@dataclass(frozen=True)
class SkirtMeasurements:
    """
    One measurement set for an A-line skirt.

    Attributes:
        waist_circumference: Full waist measurement in cm, or None if not yet provided.
        hem_circumference: Full hem sweep in cm, or None if not yet provided.
        skirt_length: Finished waist-to-hem length in cm, or None if not yet provided.
        panel_count: Number of vertical panels.  Non-integers are truncated
            by the validator, not rejected.
        allowances: Seam allowances for the waist, side and hem edges.
    """

    waist_circumference: float | None = None
    hem_circumference: float | None = None
    skirt_length: float | None = None
    panel_count: float | None = DEFAULT_PANEL_COUNT
    allowances: SeamAllowances = field(default_factory=SeamAllowances)

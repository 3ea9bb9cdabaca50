"""
Panel builder for the Planner.

Combines one waist segment, one hem segment and the skirt length with the
three seam allowances into a fully dimensioned Panel:

    waist_width_with_seam = waist_segment_width + 2 × side
    hem_width_with_seam   = hem_segment_width   + 2 × side
    height_with_seam      = skirt_length + waist + hem

Waist and hem are partitioned independently from the same panel count, so
panel i's waist and hem widths need not share a taper rate; the result is a
general trapezoid, not a simple linear flare.
"""

from __future__ import annotations

from collections.abc import Sequence

from skirtplan.schemas.measurements import SkirtMeasurements
from skirtplan.schemas.panel import Panel
from skirtplan.utilities.partition import partition
from skirtplan.validator.inputs import require_allowance, validate_measurements


def build_panel(
    index: int,
    waist_segment_width: float,
    hem_segment_width: float,
    skirt_length: float,
    waist_seam_allowance: float = 0.0,
    side_seam_allowance: float = 0.0,
    hem_seam_allowance: float = 0.0,
) -> Panel:
    """
    Build one Panel from its segment widths, length and seam allowances.

    Raises ``InvalidAllowance`` if any allowance is negative.
    """
    require_allowance(waist_seam_allowance, "waist_seam_allowance")
    require_allowance(side_seam_allowance, "side_seam_allowance")
    require_allowance(hem_seam_allowance, "hem_seam_allowance")

    return Panel(
        index=index,
        waist_width=waist_segment_width,
        hem_width=hem_segment_width,
        height=skirt_length,
        waist_width_with_seam=waist_segment_width + 2 * side_seam_allowance,
        hem_width_with_seam=hem_segment_width + 2 * side_seam_allowance,
        height_with_seam=skirt_length + waist_seam_allowance + hem_seam_allowance,
    )


def build_panels(
    measurements: SkirtMeasurements,
    waist_ratios: Sequence[float] | None = None,
    hem_ratios: Sequence[float] | None = None,
) -> tuple[Panel, ...]:
    """
    Validate *measurements* and build every panel of the skirt, in circumference order.

    ``None`` ratios fall back to evenly spaced split points.

    Raises:
        InvalidMeasurement, InvalidPanelCount: From validation, before any panel is built.
        InvalidSplitRatios: If a supplied ratio sequence does not fit the panel count.
    """
    m = validate_measurements(measurements)
    count = int(m.panel_count)
    waist_widths = partition(m.waist_circumference, waist_ratios, count)  # type: ignore[arg-type]
    hem_widths = partition(m.hem_circumference, hem_ratios, count)  # type: ignore[arg-type]

    return tuple(
        build_panel(
            index=i + 1,
            waist_segment_width=waist_widths[i],
            hem_segment_width=hem_widths[i],
            skirt_length=m.skirt_length,  # type: ignore[arg-type]
            waist_seam_allowance=m.allowances.waist,
            side_seam_allowance=m.allowances.side,
            hem_seam_allowance=m.allowances.hem,
        )
        for i in range(count)
    )

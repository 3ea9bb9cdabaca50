"""
Public calculator API.

calculate_skirt() builds a skirt's panels from a measurement set and, when a
fabric width is supplied, lays them out on the fabric.  calculate_cuts() runs
the straight-cut planner.  Both return a report regardless of whether the
input was valid, so the presentation layer can show either a result or a
single prompt without handling exceptions.

Validation happens before any computation.  An invalid measurement set
produces no panels at all; an invalid fabric width keeps the panels and
reports ``layout_error`` instead of a layout.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from skirtplan.errors import SkirtInputError, UnknownPreset
from skirtplan.fabric.cutting import plan_cuts
from skirtplan.fabric.nester import GreedyRowNester
from skirtplan.planner.planner import DeterministicPlanner, PlannerInput
from skirtplan.presets.registry import get_registry
from skirtplan.schemas.cut import CutPlan
from skirtplan.schemas.layout import FabricLayout
from skirtplan.schemas.measurements import SeamAllowances, SkirtMeasurements
from skirtplan.schemas.panel import Panel


@dataclass(frozen=True)
class SkirtReport:
    """Outcome of a skirt calculation.

    Attributes:
        passed: True when the panels were built.
        panels: The skirt's panels in circumference order, or None on failure.
        layout: The fabric layout, or None if no (valid) fabric width was given.
        error: User-facing message if the measurement set was rejected, else None.
        layout_error: User-facing message if the fabric width was rejected, else None.
    """

    passed: bool
    panels: tuple[Panel, ...] | None
    layout: FabricLayout | None
    error: str | None
    layout_error: str | None = None


@dataclass(frozen=True)
class CutReport:
    """Outcome of a straight-cut calculation.

    Attributes:
        passed: True when a plan was produced.
        plan: The CutPlan, or None on failure.
        error: User-facing message if the input was rejected, else None.
    """

    passed: bool
    plan: CutPlan | None
    error: str | None


def calculate_skirt(
    measurements: SkirtMeasurements,
    waist_ratios: Sequence[float] | None = None,
    hem_ratios: Sequence[float] | None = None,
    fabric_width: float | str | None = None,
    cut_allowance: float = 0.0,
    allowance_preset: str | None = None,
) -> SkirtReport:
    """
    Build panels and, optionally, a fabric layout.

    Parameters
    ----------
    measurements:
        Waist/hem circumference, skirt length, panel count and seam allowances (cm).
    waist_ratios, hem_ratios:
        N−1 split ratios per circumference; None means evenly spaced.
    fabric_width:
        Usable fabric width in cm, or the name of a fabric-width preset
        (e.g. ``"apparel"``).  None skips the layout step.
    cut_allowance:
        Gap kept between neighbouring panels and rows on the fabric.
    allowance_preset:
        Name of a seam-allowance preset (e.g. ``"standard"``).  When given it
        replaces ``measurements.allowances``.

    Returns
    -------
    SkirtReport
        Always returned; never raises on invalid input.
    """
    try:
        if allowance_preset is not None:
            measurements = replace(measurements, allowances=_allowances_for(allowance_preset))
        planner_out = DeterministicPlanner().plan(
            PlannerInput(
                measurements=measurements,
                waist_ratios=tuple(waist_ratios) if waist_ratios is not None else None,
                hem_ratios=tuple(hem_ratios) if hem_ratios is not None else None,
            )
        )
    except SkirtInputError as exc:
        return SkirtReport(passed=False, panels=None, layout=None, error=exc.user_message)

    panels = planner_out.panels
    if fabric_width is None:
        return SkirtReport(passed=True, panels=panels, layout=None, error=None)

    try:
        if isinstance(fabric_width, str):
            fabric_width = _fabric_width_for(fabric_width)
        layout = GreedyRowNester().layout(panels, fabric_width, cut_allowance)
    except SkirtInputError as exc:
        return SkirtReport(
            passed=True,
            panels=panels,
            layout=None,
            error=None,
            layout_error=exc.user_message,
        )

    return SkirtReport(passed=True, panels=panels, layout=layout, error=None)


def _allowances_for(preset_id: str) -> SeamAllowances:
    try:
        return get_registry().get_allowances(preset_id)
    except KeyError:
        raise UnknownPreset("allowance_preset", f"no preset named {preset_id!r}") from None


def _fabric_width_for(preset_id: str) -> float:
    try:
        return get_registry().get_fabric_width(preset_id)
    except KeyError:
        raise UnknownPreset("fabric_width", f"no preset named {preset_id!r}") from None


def calculate_cuts(
    fabric_length: float | None,
    wanted_length: float | None,
    seam_allowance: float = 0.0,
) -> CutReport:
    """
    Plan straight cuts of *fabric_length* covering *wanted_length* plus allowances.

    Always returned; never raises on invalid input.
    """
    try:
        plan = plan_cuts(fabric_length, wanted_length, seam_allowance)
    except SkirtInputError as exc:
        message = exc.user_message
        if exc.field in ("fabric_length", "wanted_length"):
            message = "Please enter valid positive numbers for both lengths."
        return CutReport(passed=False, plan=None, error=message)
    return CutReport(passed=True, plan=plan, error=None)

"""
Calculator session: the split-point state behind the interactive calculator.

The presentation layer owns a CalculatorSession and replaces it on every user
action; nothing is mutated in place.  Changing the panel count resets both
ratio sequences to evenly spaced defaults.  Moving a split point goes through
``clamp_and_sort``, so a session's ratios are always sorted and bounded.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from skirtplan.planner.planner import DeterministicPlanner, PlannerInput
from skirtplan.schemas.measurements import SeamAllowances, SkirtMeasurements
from skirtplan.schemas.panel import Panel
from skirtplan.utilities.partition import (
    check_split_ratios,
    clamp_and_sort,
    default_split_ratios,
    partition,
)
from skirtplan.validator.inputs import normalize_panel_count


@dataclass(frozen=True)
class CalculatorSession:
    """
    Immutable snapshot of one calculator session.

    Attributes:
        measurements: Current measurement set; lengths may still be None.
        waist_ratios: N−1 split ratios along the waist circumference.
        hem_ratios: N−1 split ratios along the hem circumference.
    """

    measurements: SkirtMeasurements
    waist_ratios: tuple[float, ...]
    hem_ratios: tuple[float, ...]

    def __post_init__(self) -> None:
        count = self.panel_count
        check_split_ratios(self.waist_ratios, count)
        check_split_ratios(self.hem_ratios, count)

    @classmethod
    def start(cls, measurements: SkirtMeasurements | None = None) -> CalculatorSession:
        """Open a session with evenly spaced split points for the measurement set's panel count."""
        m = measurements if measurements is not None else SkirtMeasurements()
        defaults = default_split_ratios(normalize_panel_count(m.panel_count))
        return cls(measurements=m, waist_ratios=defaults, hem_ratios=defaults)

    @property
    def panel_count(self) -> int:
        return normalize_panel_count(self.measurements.panel_count)

    # ── Updates ────────────────────────────────────────────────────────────────

    def with_panel_count(self, panel_count: float) -> CalculatorSession:
        """Return a session with a new (truncated) panel count and default split points."""
        count = normalize_panel_count(panel_count)
        defaults = default_split_ratios(count)
        return CalculatorSession(
            measurements=replace(self.measurements, panel_count=count),
            waist_ratios=defaults,
            hem_ratios=defaults,
        )

    def with_measurements(self, measurements: SkirtMeasurements) -> CalculatorSession:
        """
        Return a session with new measurements.

        Split points are kept unless the panel count changed, in which case
        they are reset to defaults.
        """
        if normalize_panel_count(measurements.panel_count) != self.panel_count:
            return CalculatorSession.start(measurements)
        return replace(self, measurements=measurements)

    def with_allowances(self, allowances: SeamAllowances) -> CalculatorSession:
        return replace(self, measurements=replace(self.measurements, allowances=allowances))

    def adjust_waist_split(self, index: int, value: float) -> CalculatorSession:
        """Move waist split point *index* towards *value*, clamped between its neighbours."""
        return replace(self, waist_ratios=clamp_and_sort(self.waist_ratios, index, value))

    def adjust_hem_split(self, index: int, value: float) -> CalculatorSession:
        """Move hem split point *index* towards *value*, clamped between its neighbours."""
        return replace(self, hem_ratios=clamp_and_sort(self.hem_ratios, index, value))

    # ── Derived values ─────────────────────────────────────────────────────────

    def waist_widths(self) -> tuple[float, ...]:
        """Preview waist segment widths; empty while the waist is not a positive number."""
        return _preview(self.measurements.waist_circumference, self.waist_ratios, self.panel_count)

    def hem_widths(self) -> tuple[float, ...]:
        """Preview hem segment widths; empty while the hem is not a positive number."""
        return _preview(self.measurements.hem_circumference, self.hem_ratios, self.panel_count)

    def panels(self) -> tuple[Panel, ...]:
        """
        Build the skirt's panels from the current state.

        Raises the validator's SkirtInputError subclasses if the measurement
        set is incomplete or invalid.
        """
        out = DeterministicPlanner().plan(
            PlannerInput(
                measurements=self.measurements,
                waist_ratios=self.waist_ratios,
                hem_ratios=self.hem_ratios,
            )
        )
        return out.panels


def _preview(total: float | None, ratios: tuple[float, ...], count: int) -> tuple[float, ...]:
    if total is None or total <= 0:
        return ()
    return partition(total, ratios, count)

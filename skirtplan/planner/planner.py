"""
Planner protocol, data contracts, and DeterministicPlanner implementation.

The Planner converts:
  SkirtMeasurements + waist split ratios + hem split ratios
    → PlannerOutput (per-circumference segment widths + Panel tuple)

DeterministicPlanner is pure arithmetic.  The protocol boundary is the
input/output dataclasses, so an alternative planner (e.g. one that derives
split points from a style preset) can be swapped in without touching callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from skirtplan.planner.panels import build_panels
from skirtplan.schemas.measurements import SkirtMeasurements
from skirtplan.schemas.panel import Panel


@dataclass(frozen=True)
class PlannerInput:
    """Input bundle for the Planner."""

    measurements: SkirtMeasurements
    waist_ratios: tuple[float, ...] | None = None  # None = evenly spaced
    hem_ratios: tuple[float, ...] | None = None  # None = evenly spaced


@dataclass(frozen=True)
class PlannerOutput:
    """Output of the Planner."""

    panels: tuple[Panel, ...]  # circumference order, index 1..N

    @property
    def waist_widths(self) -> tuple[float, ...]:
        return tuple(p.waist_width for p in self.panels)

    @property
    def hem_widths(self) -> tuple[float, ...]:
        return tuple(p.hem_width for p in self.panels)


@runtime_checkable
class Planner(Protocol):
    """Protocol for all Planner implementations."""

    def plan(self, planner_input: PlannerInput) -> PlannerOutput: ...


class DeterministicPlanner:
    """
    Planner implementation using only the partition engine and panel builder.

    Raises the validator's SkirtInputError subclasses on bad input; it never
    returns a partial panel list.
    """

    def plan(self, planner_input: PlannerInput) -> PlannerOutput:
        panels = build_panels(
            planner_input.measurements,
            planner_input.waist_ratios,
            planner_input.hem_ratios,
        )
        return PlannerOutput(panels=panels)

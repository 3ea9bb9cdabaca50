"""planner — Planner public API."""

from skirtplan.planner.panels import build_panel, build_panels
from skirtplan.planner.planner import DeterministicPlanner, Planner, PlannerInput, PlannerOutput
from skirtplan.planner.session import CalculatorSession

__all__ = [
    "CalculatorSession",
    "DeterministicPlanner",
    "Planner",
    "PlannerInput",
    "PlannerOutput",
    "build_panel",
    "build_panels",
]

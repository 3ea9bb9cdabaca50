"""schemas — frozen records passed between calculator stages."""

from skirtplan.schemas.cut import CutPlan
from skirtplan.schemas.layout import FabricLayout, LayoutPlacement, Rotation
from skirtplan.schemas.measurements import DEFAULT_PANEL_COUNT, SeamAllowances, SkirtMeasurements
from skirtplan.schemas.panel import Panel

__all__ = [
    "CutPlan",
    "DEFAULT_PANEL_COUNT",
    "FabricLayout",
    "LayoutPlacement",
    "Panel",
    "Rotation",
    "SeamAllowances",
    "SkirtMeasurements",
]

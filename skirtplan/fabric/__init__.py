"""fabric — Fabric Nester and Cut Planner public API."""

from skirtplan.fabric.cutting import plan_cuts
from skirtplan.fabric.nester import FabricNester, GreedyRowNester, layout_panels, packing_order

__all__ = ["FabricNester", "GreedyRowNester", "layout_panels", "packing_order", "plan_cuts"]

"""api — entry points for the presentation layer."""

from skirtplan.api.calculate import CutReport, SkirtReport, calculate_cuts, calculate_skirt

__all__ = ["CutReport", "SkirtReport", "calculate_cuts", "calculate_skirt"]

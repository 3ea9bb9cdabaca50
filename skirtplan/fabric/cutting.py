"""
Cut Planner: straight cuts of a fixed fabric length.

Given the length of one available fabric cut and the length wanted, works
out how many whole cuts are needed and how long the final partial piece is.
A seam allowance is added at each end of the wanted length first:

    total_wanted = wanted_length + 2 × seam_allowance
    cuts         = total_wanted / fabric_length
    full_cuts    = floor(cuts)
    remainder    = total_wanted − full_cuts × fabric_length

Independent of the panel pipeline; it consumes only two lengths and an allowance.
"""

from __future__ import annotations

import math

from skirtplan.schemas.cut import CutPlan
from skirtplan.validator.inputs import require_allowance, require_positive


def plan_cuts(
    fabric_length: float | None,
    wanted_length: float | None,
    seam_allowance: float = 0.0,
) -> CutPlan:
    """
    Break *wanted_length* (plus allowances) into whole *fabric_length* pieces and a remainder.

    Raises:
        InvalidMeasurement: If either length is missing, not finite, or <= 0.
        InvalidAllowance: If seam_allowance is not a finite number >= 0.
    """
    fabric = require_positive(fabric_length, "fabric_length")
    wanted = require_positive(wanted_length, "wanted_length")
    allowance = require_allowance(seam_allowance, "seam_allowance")

    total_wanted = wanted + 2 * allowance
    cuts = total_wanted / fabric
    full_cuts = math.floor(cuts)
    remainder = total_wanted - full_cuts * fabric

    pieces = [fabric] * full_cuts
    if remainder > 0:
        pieces.append(remainder)

    return CutPlan(
        fabric_length=fabric,
        wanted_length=wanted,
        seam_allowance=allowance,
        total_wanted=total_wanted,
        cuts=cuts,
        full_cuts=full_cuts,
        remainder=remainder,
        pieces=tuple(pieces),
    )

"""
Fabric Nester: lay a skirt's panels out on a fixed-width fabric.

GreedyRowNester (v1)
--------------------
Greedy shelf packing.  Panels are sorted widest hem first (ties by panel
index), then placed left to right.  A panel that would push the cursor past
the fabric width (counting the cut allowance after it) starts a new row
below the tallest panel of the current row plus one cut allowance.  The
final row adds its height with no trailing allowance; the sum of row heights
and allowances is the required fabric length.

Every odd position in packing order is rotated 180° so that a wide hem sits
beside a narrow waist.  Rotation is visual only: packing uses the same
bounding box for both orientations, so the heuristic does not shorten the
layout.  A layout that really nests rotated neighbours would need a per-pair
effective width, which this nester does not model.

A panel wider than the fabric is still placed, alone on its own row, and is
reported through ``FabricLayout.overflowing`` and a UserWarning.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from skirtplan.schemas.layout import FabricLayout, LayoutPlacement, Rotation
from skirtplan.schemas.panel import Panel
from skirtplan.validator.inputs import require_allowance, validate_fabric_width


def packing_order(panels: Iterable[Panel]) -> list[Panel]:
    """Sort panels widest hem first; equal hems keep ascending panel index."""
    return sorted(panels, key=lambda p: (-p.hem_width_with_seam, p.index))


def layout_panels(
    panels: Iterable[Panel],
    fabric_width: float,
    cut_allowance: float = 0.0,
) -> FabricLayout:
    """
    Pack *panels* into rows across *fabric_width* and measure the fabric length used.

    Args:
        panels: The skirt's panels, in any order.
        fabric_width: Usable fabric width in cm.
        cut_allowance: Gap kept after each panel in a row and between rows.

    Returns:
        FabricLayout with one placement per panel, in packing order.

    Raises:
        InvalidFabricWidth: If fabric_width is not a finite number > 0.
        InvalidAllowance: If cut_allowance is not a finite number >= 0.
    """
    return _pack_rows(panels, fabric_width, cut_allowance)


def _pack_rows(
    panels: Iterable[Panel],
    fabric_width: float,
    cut_allowance: float,
) -> FabricLayout:
    # Only called from layout_panels and GreedyRowNester.layout; stacklevel=3
    # attributes oversize warnings to their caller.
    width = validate_fabric_width(fabric_width)
    allowance = require_allowance(cut_allowance, "cut_allowance")

    placements: list[LayoutPlacement] = []
    x = 0.0
    row_top = 0.0
    row_height = 0.0
    row = 0
    row_is_empty = True

    for position, panel in enumerate(packing_order(panels)):
        panel_width = panel.bounding_width
        panel_height = panel.height_with_seam

        if not row_is_empty and x + panel_width + allowance > width:
            row_top += row_height + allowance
            row += 1
            x = 0.0
            row_height = 0.0

        if panel_width > width:
            warnings.warn(
                f"Panel {panel.index} is {panel_width:.2f} cm wide, wider than the "
                f"{width:.2f} cm fabric; it is placed alone on its row.",
                stacklevel=3,
            )

        rotation = Rotation.INVERTED if position % 2 else Rotation.UPRIGHT
        placements.append(LayoutPlacement(panel=panel, x=x, y=row_top, row=row, rotation=rotation))

        x += panel_width + allowance
        row_height = max(row_height, panel_height)
        row_is_empty = False

    required_length = row_top + row_height if placements else 0.0
    return FabricLayout(
        placements=tuple(placements),
        required_length=required_length,
        fabric_width=width,
        cut_allowance=allowance,
    )


@runtime_checkable
class FabricNester(Protocol):
    """Protocol that all Fabric Nester implementations must satisfy."""

    def layout(
        self,
        panels: Iterable[Panel],
        fabric_width: float,
        cut_allowance: float = 0.0,
    ) -> FabricLayout:
        """Place every panel on the fabric and report the length required."""
        ...


class GreedyRowNester:
    """Fabric Nester using greedy row packing with alternating 180° rotation.

    Deterministic: identical inputs always give identical placements and
    required length.
    """

    def layout(
        self,
        panels: Iterable[Panel],
        fabric_width: float,
        cut_allowance: float = 0.0,
    ) -> FabricLayout:
        return _pack_rows(panels, fabric_width, cut_allowance)

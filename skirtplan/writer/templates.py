"""
Prose templates for the TemplateWriter.

render_panel_card describes one panel's finished and seam-inclusive sizes.
render_layout describes a fabric layout row by row.
render_cut_plan explains a straight-cut plan.

All lengths are printed in cm with two decimals.
"""

from __future__ import annotations

from skirtplan.schemas.cut import CutPlan
from skirtplan.schemas.layout import FabricLayout, LayoutPlacement
from skirtplan.schemas.panel import Panel

UNIT = "cm"


def fmt_length(value: float) -> str:
    return f"{value:.2f}{UNIT}"


def panel_title(panel: Panel) -> str:
    return f"Panel {panel.index}"


def render_panel_card(panel: Panel) -> str:
    """Render one panel's dimensions, finished size first, seam-inclusive in brackets."""
    lines = [
        panel_title(panel),
        f"Waist Width: {fmt_length(panel.waist_width)} "
        f"({fmt_length(panel.waist_width_with_seam)} with seam)",
        f"Hem Width: {fmt_length(panel.hem_width)} "
        f"({fmt_length(panel.hem_width_with_seam)} with seam)",
        f"Length: {fmt_length(panel.height)} ({fmt_length(panel.height_with_seam)} with seam)",
    ]
    return "\n".join(lines)


def _placement_label(placement: LayoutPlacement) -> str:
    label = panel_title(placement.panel)
    if placement.rotated:
        label += " (upside down)"
    return label


def render_layout(layout: FabricLayout) -> str:
    """Render a fabric layout: totals, then one line per row in packing order."""
    lines = [
        "Fabric Layout",
        f"Fabric Width: {fmt_length(layout.fabric_width)}",
        f"Required Length: {fmt_length(layout.required_length)}",
        f"Cut Allowance between panels: {fmt_length(layout.cut_allowance)}",
    ]
    if not layout.placements:
        lines.append("No panels to lay out.")
        return "\n".join(lines)

    for number, row in enumerate(layout.rows(), start=1):
        lines.append(f"Row {number}: " + ", ".join(_placement_label(p) for p in row))
    lines.append(f"Fabric utilization: {layout.utilization * 100:.1f}%")
    for index in layout.overflowing:
        lines.append(f"Warning: Panel {index} is wider than the fabric.")
    return "\n".join(lines)


def render_cut_plan(plan: CutPlan) -> str:
    """Explain a straight-cut plan in one short paragraph."""
    parts = [f"You need to cut the main fabric {plan.cuts:.2f} times."]
    if plan.seam_allowance > 0:
        parts.append(
            f"That includes {fmt_length(plan.seam_allowance)} of seam allowance at each end, "
            f"{fmt_length(plan.total_wanted)} in total."
        )
    if plan.full_cuts > 0:
        parts.append(
            f"Meaning, you will have {plan.full_cuts} piece(s) of {fmt_length(plan.fabric_length)}."
        )
    if plan.remainder > 0:
        parts.append(f"And the final piece will be {fmt_length(plan.remainder)}.")
    elif plan.full_cuts > 0:
        parts.append(f"All pieces will be {fmt_length(plan.fabric_length)}.")
    return " ".join(parts)

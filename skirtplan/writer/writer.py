"""
TemplateWriter — converts calculator results into cutting-sheet prose.

Sections, in order:
  1. One panel card per panel, keyed ``panel_<index>``, in the order given.
  2. ``layout``: the fabric layout, when one is supplied.
  3. ``cuts``: the straight-cut plan, when one is supplied.

All sections are concatenated into full_text in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from skirtplan.schemas.cut import CutPlan
from skirtplan.schemas.layout import FabricLayout
from skirtplan.schemas.panel import Panel
from skirtplan.writer.templates import render_cut_plan, render_layout, render_panel_card

LAYOUT_SECTION = "layout"
CUTS_SECTION = "cuts"


def panel_section_key(panel: Panel) -> str:
    return f"panel_{panel.index}"


@dataclass(frozen=True)
class WriterInput:
    """Complete input bundle for a writer."""

    panels: tuple[Panel, ...]
    layout: FabricLayout | None = None
    cut_plan: CutPlan | None = None

    @property
    def section_order(self) -> list[str]:
        order = [panel_section_key(p) for p in self.panels]
        if self.layout is not None:
            order.append(LAYOUT_SECTION)
        if self.cut_plan is not None:
            order.append(CUTS_SECTION)
        return order


@dataclass(frozen=True)
class WriterOutput:
    """Output of a successful write."""

    sections: dict[str, str]  # section key → section text
    full_text: str  # all sections concatenated in section_order


@runtime_checkable
class CuttingWriter(Protocol):
    """Protocol for cutting-sheet writers."""

    def write(self, writer_input: WriterInput) -> WriterOutput: ...


class TemplateWriter:
    """Deterministic template-based writer."""

    def write(self, wi: WriterInput) -> WriterOutput:
        sections: dict[str, str] = {}
        for panel in wi.panels:
            sections[panel_section_key(panel)] = render_panel_card(panel)
        if wi.layout is not None:
            sections[LAYOUT_SECTION] = render_layout(wi.layout)
        if wi.cut_plan is not None:
            sections[CUTS_SECTION] = render_cut_plan(wi.cut_plan)

        full_text = "\n\n".join(sections[key] for key in wi.section_order)
        return WriterOutput(sections=sections, full_text=full_text)

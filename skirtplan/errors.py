"""
Input validation errors for the skirt calculator.

Every failure the core can report is a local-data problem: a missing or
non-positive measurement, an impossible panel count, a bad fabric width.
Nothing is retried and nothing is fatal; the caller recovers by prompting
for corrected input, using ``user_message`` as the prompt text.

All errors derive from ``ValueError`` so ``__post_init__`` checks and plain
arithmetic guards can raise them without callers needing a second except
clause.
"""

from __future__ import annotations


class SkirtInputError(ValueError):
    """Base class for rejected calculator input.

    Attributes:
        field: Name of the offending input (e.g. ``"waist_circumference"``).
        detail: Developer-facing description including the rejected value.
        user_message: Short prompt suitable for display next to the form.
    """

    user_message: str = "Please check your input."

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"[{field}] {detail}")
        self.field = field
        self.detail = detail


class InvalidMeasurement(SkirtInputError):
    """A circumference or length is missing or not strictly positive."""

    user_message = "Please enter valid positive numbers for all main inputs."


class InvalidPanelCount(SkirtInputError):
    """Panel count is zero or negative after truncation."""

    user_message = "Please enter a panel count of at least 1."


class InvalidFabricWidth(SkirtInputError):
    """Fabric width is missing or not strictly positive (layout only)."""

    user_message = "Please enter a valid Fabric Width."


class InvalidAllowance(SkirtInputError):
    """A seam or cut allowance is negative."""

    user_message = "Seam allowances cannot be negative."


class InvalidSplitRatios(SkirtInputError):
    """A split-ratio sequence has the wrong length, is unsorted, or leaves [0, 1]."""

    user_message = "Split points must be ordered between 0 and 1."


class UnknownPreset(SkirtInputError):
    """A named allowance or fabric-width preset does not exist."""

    user_message = "Please choose one of the listed presets."

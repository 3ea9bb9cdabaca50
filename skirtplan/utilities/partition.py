"""
Partition engine: split a circumference into N panel widths at N−1 split points.

Split points are expressed as ratios in [0, 1] measured from a fixed origin
on the circumference.  0 and 1 are implicit boundaries, so N−1 ratios define
N segments:

    width[i] = (ratio[i] − ratio[i−1]) × total,   ratio[−1] = 0, ratio[N−1] = 1

The widths telescope, so they always sum to ``total`` (up to float rounding)
and none is negative as long as the ratios are sorted and bounded.
``clamp_and_sort`` is the only way the interactive layer updates a ratio, and
it maintains exactly that invariant.

All functions are pure.
"""

from __future__ import annotations

from collections.abc import Sequence

from skirtplan.errors import InvalidPanelCount, InvalidSplitRatios


def default_split_ratios(panel_count: int) -> tuple[float, ...]:
    """
    Evenly spaced split ratios for *panel_count* panels: ratio[i] = (i + 1) / N.

    Returns an empty tuple for a single panel.

    Raises:
        InvalidPanelCount: If panel_count < 1.
    """
    if panel_count < 1:
        raise InvalidPanelCount("panel_count", f"must be >= 1, got {panel_count}")
    return tuple((i + 1) / panel_count for i in range(panel_count - 1))


def check_split_ratios(split_ratios: Sequence[float], panel_count: int) -> None:
    """
    Verify that *split_ratios* is a valid sequence for *panel_count* panels.

    Raises:
        InvalidSplitRatios: If the sequence does not hold exactly N−1 values,
            any value falls outside [0, 1], or the values are not non-decreasing.
    """
    expected = panel_count - 1
    if len(split_ratios) != expected:
        raise InvalidSplitRatios(
            "split_ratios",
            f"{panel_count} panels need {expected} split ratios, got {len(split_ratios)}",
        )
    previous = 0.0
    for i, ratio in enumerate(split_ratios):
        if ratio is None or not 0.0 <= ratio <= 1.0:
            raise InvalidSplitRatios("split_ratios", f"ratio[{i}] = {ratio} is outside [0, 1]")
        if ratio < previous:
            raise InvalidSplitRatios(
                "split_ratios",
                f"ratio[{i}] = {ratio} is less than the previous ratio {previous}",
            )
        previous = ratio


def clamp_and_sort(
    ratios: Sequence[float],
    changed_index: int,
    new_value: float,
) -> tuple[float, ...]:
    """
    Move one split point, keeping the sequence ordered and within [0, 1].

    The new value is clamped into [previous ratio, next ratio], or [0, 1] at
    the ends of the sequence, and the result is returned sorted.  An
    out-of-range value is never rejected, only clamped.

    Args:
        ratios: Current split ratios (not modified).
        changed_index: Position of the ratio being moved.
        new_value: Requested new position, in any range.

    Returns:
        A new tuple of split ratios.

    Raises:
        IndexError: If changed_index does not address an existing ratio.
    """
    values = list(ratios)
    if not 0 <= changed_index < len(values):
        raise IndexError(
            f"changed_index {changed_index} out of range for {len(values)} split ratios"
        )

    lower = values[changed_index - 1] if changed_index > 0 else 0.0
    upper = values[changed_index + 1] if changed_index < len(values) - 1 else 1.0
    lower = max(0.0, lower)
    upper = min(1.0, upper)

    values[changed_index] = max(lower, min(upper, new_value))
    return tuple(sorted(values))


def partition(
    total: float,
    split_ratios: Sequence[float] | None,
    panel_count: int,
) -> tuple[float, ...]:
    """
    Split *total* into *panel_count* segment widths at *split_ratios*.

    Args:
        total: Circumference to divide, in cm.
        split_ratios: N−1 ordered ratios in [0, 1], or None for evenly
            spaced defaults.
        panel_count: Number of segments N.

    Returns:
        N non-negative widths, in circumference order, summing to *total*.

    Raises:
        InvalidPanelCount: If panel_count < 1.
        InvalidSplitRatios: If split_ratios is not a valid sequence for N panels.
    """
    if panel_count < 1:
        raise InvalidPanelCount("panel_count", f"must be >= 1, got {panel_count}")

    if split_ratios is None:
        split_ratios = default_split_ratios(panel_count)
    check_split_ratios(split_ratios, panel_count)

    bounds = (0.0, *split_ratios, 1.0)
    return tuple((end - start) * total for start, end in zip(bounds, bounds[1:]))

"""
Input Validator — public API.

Exposed names
-------------
validate_measurements  -- check and normalise a SkirtMeasurements set
validate_fabric_width  -- check the fabric width used for layout
normalize_panel_count  -- truncate a panel count and check it is >= 1
require_positive       -- generic positive-length check (InvalidMeasurement)
require_allowance      -- generic non-negative allowance check (InvalidAllowance)
"""

from skirtplan.validator.inputs import (
    normalize_panel_count,
    require_allowance,
    require_positive,
    validate_fabric_width,
    validate_measurements,
)

__all__ = [
    "validate_measurements",
    "validate_fabric_width",
    "normalize_panel_count",
    "require_positive",
    "require_allowance",
]

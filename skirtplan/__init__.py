"""
skirtplan — A-line skirt panel geometry and fabric layout.

Derives cuttable trapezoidal panels from body measurements, packs them onto
a bolt of fabric to estimate the length required, and plans straight cuts of
fixed fabric lengths.  All lengths are in centimetres.
"""

__version__ = "0.1.0"

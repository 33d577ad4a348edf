"""Tolerance constants for geometric calculations.

Centralizes all tolerance values used throughout the codebase for
consistency and easy tuning.
"""

# Pivot circle matching tolerance (model units)
# A circle center lies on a toroid's pivot circle when its distance to the
# toroid center differs from the major radius by less than this
MATCH_TOLERANCE: float = 1e-11

# Zero vector detection threshold
# Vectors with magnitude below this are considered zero-length
ZERO_MAGNITUDE: float = 1e-10

"""Growing Degree Days (GDD) computation.

GDD measures heat units accumulated per day relative to a base temperature.
The frost engine only needs the daily values; it never looks at the formula.

Public API:
  - compute: daily_gdd, EQUATIONS and the default parameters
"""

from late_frost.gdd.compute import (
    DEFAULT_BASE_TEMP_C,
    DEFAULT_EQUATION,
    DEFAULT_TFROST_C,
    DEFAULT_UPPER_CUTOFF_C,
    EQUATIONS,
    daily_gdd,
)

__all__ = [
    "DEFAULT_BASE_TEMP_C",
    "DEFAULT_EQUATION",
    "DEFAULT_TFROST_C",
    "DEFAULT_UPPER_CUTOFF_C",
    "EQUATIONS",
    "daily_gdd",
]

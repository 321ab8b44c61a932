"""Exception hierarchy for late-frost.

Missing temperatures are never an error; these cover malformed input and
bad configuration. Remote failures surface as the underlying ``requests``
exceptions.
"""

from __future__ import annotations


class LateFrostError(Exception):
    """Base exception for late-frost errors."""


class ShapeError(LateFrostError, ValueError):
    """Input has the wrong number of columns, dimensions or elements."""


class DateCoercionError(LateFrostError, ValueError):
    """A value could not be interpreted as a calendar date."""


class UnknownEquationError(LateFrostError, ValueError):
    """The requested GDD equation variant does not exist."""

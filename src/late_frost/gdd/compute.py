"""Pure daily GDD computation (no I/O).

All variants return *daily* heat units clipped at zero; a missing max or min
temperature yields ``NaN`` for that day.

    variant_a   GDD = (T_max + T_min) / 2 - base
    variant_b   T_max, T_min raised to base, then as variant_a
    variant_c   T_min raised to base, T_max capped at upper, then as variant_a
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from late_frost.exceptions import ShapeError, UnknownEquationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from numpy.typing import ArrayLike, NDArray

# Celsius defaults for late spring frost in temperate crops
DEFAULT_BASE_TEMP_C = 4.0
DEFAULT_TFROST_C = -2.0
DEFAULT_UPPER_CUTOFF_C = 30.0
DEFAULT_EQUATION = "variant_a"


def _variant_a(
    tmax: NDArray[np.float64], tmin: NDArray[np.float64], base: float, upper: float
) -> NDArray[np.float64]:
    return (tmax + tmin) / 2 - base


def _variant_b(
    tmax: NDArray[np.float64], tmin: NDArray[np.float64], base: float, upper: float
) -> NDArray[np.float64]:
    return (np.maximum(tmax, base) + np.maximum(tmin, base)) / 2 - base


def _variant_c(
    tmax: NDArray[np.float64], tmin: NDArray[np.float64], base: float, upper: float
) -> NDArray[np.float64]:
    return (np.minimum(tmax, upper) + np.maximum(tmin, base)) / 2 - base


_FORMULAS: dict[str, Callable[..., NDArray[np.float64]]] = {
    "variant_a": _variant_a,
    "variant_b": _variant_b,
    "variant_c": _variant_c,
}

EQUATIONS: tuple[str, ...] = tuple(_FORMULAS)


def daily_gdd(
    tmax: ArrayLike,
    tmin: ArrayLike,
    base: float = DEFAULT_BASE_TEMP_C,
    equation: str = DEFAULT_EQUATION,
    upper: float = DEFAULT_UPPER_CUTOFF_C,
) -> NDArray[np.float64]:
    """Compute daily growing degree-days for paired temperature sequences.

    Args:
        tmax: Daily maximum temperatures (Celsius).
        tmin: Daily minimum temperatures (Celsius).
        base: Base development temperature.
        equation: One of :data:`EQUATIONS`.
        upper: Upper temperature cap, only used by ``variant_c``.

    Returns:
        Float array of the same length, values >= 0 or ``NaN`` where a
        temperature was missing.

    Raises:
        ShapeError: If ``tmax`` and ``tmin`` differ in length.
        UnknownEquationError: If ``equation`` is not a known variant.
    """
    tmax_arr = np.asarray(tmax, dtype=float)
    tmin_arr = np.asarray(tmin, dtype=float)
    if tmax_arr.shape != tmin_arr.shape:
        msg = f"tmax and tmin differ in shape: {tmax_arr.shape} != {tmin_arr.shape}"
        raise ShapeError(msg)

    try:
        formula = _FORMULAS[equation]
    except KeyError:
        msg = f"Unknown GDD equation {equation!r}; expected one of {', '.join(EQUATIONS)}"
        raise UnknownEquationError(msg) from None

    # np.maximum keeps NaN, so missing days stay missing
    return np.maximum(formula(tmax_arr, tmin_arr, base, upper), 0.0)

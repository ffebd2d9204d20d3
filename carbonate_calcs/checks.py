"""Input checks at the carbonate-system entry points."""

import warnings

import numpy as np

from .constants import SALINITY_RANGE, TEMPERATURE_RANGE
from .exceptions import InvalidInputError, RangeWarning
from .options import OPTIONS


def is_finite(value, name):
    """Check that every element of the input is a finite real number."""
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}.")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must be finite, got {value!r}.")
    return True


def is_positive(value, name, units):
    """Check that a concentration or pressure is finite and strictly positive."""
    is_finite(value, name)
    if np.any(np.asarray(value, dtype=float) <= 0):
        raise InvalidInputError(
            f"{name} must be positive, got {value!r} {units}."
        )
    return True


def has_valid_temperature_salinity(TC, S):
    """Check TC and S, warning when they leave the range of the empirical fits."""
    is_finite(TC, "Temperature")
    is_finite(S, "Salinity")
    TC_arr = np.asarray(TC, dtype=float)
    S_arr = np.asarray(S, dtype=float)
    if np.any(TC_arr <= -273.15):
        raise InvalidInputError(
            f"Temperature must be above absolute zero, got {TC!r} °C."
        )
    if np.any(S_arr < 0):
        raise InvalidInputError(f"Salinity must be non-negative, got {S!r}.")

    if OPTIONS["warn_for_range"]:
        t_lo, t_hi = TEMPERATURE_RANGE
        s_lo, s_hi = SALINITY_RANGE
        if np.any((TC_arr < t_lo) | (TC_arr > t_hi)):
            warnings.warn(
                f"Temperature {TC!r} °C is outside the {t_lo}-{t_hi} °C validity "
                "range of the equilibrium constants; values are extrapolated.",
                RangeWarning,
                stacklevel=4,
            )
        if np.any((S_arr < s_lo) | (S_arr > s_hi)):
            warnings.warn(
                f"Salinity {S!r} is outside the {s_lo}-{s_hi} validity range "
                "of the equilibrium constants; values are extrapolated.",
                RangeWarning,
                stacklevel=4,
            )
    return True

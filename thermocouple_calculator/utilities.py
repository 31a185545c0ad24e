"""Polynomial evaluation and range checks for thermocouple reference functions."""

from typing import Sequence, Tuple
import numpy as np


class OutOfRangeError(ValueError):
    """Raised when a value falls outside a reference function's documented range."""

    def __init__(self, message: str, value=None, valid_range: Tuple[float, float] = None):
        self.value = value
        self.valid_range = valid_range
        super().__init__(message)


def calc_equation(z: Sequence[float], x):
    """Polynomial: sum of z[i] * x^i, evaluated by Horner's rule."""
    y = 0.0
    for c in reversed(z):
        y = np.multiply(y, x) + c
    return y


def validate_range(value, valid_range: Tuple[float, float], quantity: str = "value", unit: str = ""):
    """Raise OutOfRangeError unless every element of value lies within [low, high]."""
    low, high = valid_range
    arr = np.asarray(value, dtype=np.float64)
    if arr.size == 0:
        return value
    if np.isnan(arr).any():
        raise OutOfRangeError(f"{quantity} is NaN", value=value, valid_range=valid_range)
    lo_seen, hi_seen = float(np.min(arr)), float(np.max(arr))
    if lo_seen < low or hi_seen > high:
        bad = lo_seen if lo_seen < low else hi_seen
        raise OutOfRangeError(
            f"{quantity} {bad:g}{unit} outside valid range [{low:g}{unit}, {high:g}{unit}]",
            value=value,
            valid_range=valid_range,
        )
    return value

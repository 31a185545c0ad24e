"""
Data models for thermocouple reference functions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union
import numpy as np

from .utilities import calc_equation

Number = Union[float, np.ndarray]


class ThermocoupleType(Enum):
    """Standardized thermocouple constructions (GOST R 8.585-2001)."""

    R = "R"
    S = "S"
    B = "B"
    J = "J"
    T = "T"
    E = "E"
    K = "K"
    N = "N"
    A1 = "A-1"
    A2 = "A-2"
    A3 = "A-3"
    L = "L"
    M = "M"

    @property
    def code(self) -> int:
        """Integer selector, in declaration order (R = 0 ... M = 12)."""
        return list(ThermocoupleType).index(self)


@dataclass(frozen=True)
class ExponentialTerm:
    """Correction a0 * exp(a1 * (t - a2)^2) added on top of a power series."""

    a0: float
    a1: float
    a2: float

    def evaluate(self, x: Number) -> Number:
        return self.a0 * np.exp(self.a1 * np.square(x - self.a2))


@dataclass(frozen=True)
class Segment:
    """
    A single power series valid from `lower` (inclusive) up to the next
    segment's lower bound. The first segment of a function has lower=None.
    """

    lower: Optional[float]
    coefficients: Tuple[float, ...]
    exponential: Optional[ExponentialTerm] = None

    def evaluate(self, x: Number) -> Number:
        y = calc_equation(self.coefficients, x)
        if self.exponential is not None:
            y = y + self.exponential.evaluate(x)
        return y


@dataclass(frozen=True)
class ReferenceFunction:
    """
    Piecewise reference function: either temperature (°C) -> EMF (mV) or
    EMF (mV) -> temperature (°C). Works on floats and numpy arrays.
    """

    segments: Tuple[Segment, ...]

    def __post_init__(self):
        if not self.segments:
            raise ValueError("A reference function needs at least one segment")
        if self.segments[0].lower is not None:
            raise ValueError("The first segment must be open below (lower=None)")
        bounds = self.breakpoints
        if any(b is None for b in bounds):
            raise ValueError("Only the first segment may be open below")
        if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
            raise ValueError("Segment bounds must be strictly increasing")

    @property
    def breakpoints(self) -> Tuple[float, ...]:
        """Lower bounds of every segment after the first."""
        return tuple(s.lower for s in self.segments[1:])

    def segment_index(self, x: Number) -> Union[int, np.ndarray]:
        """Index of the segment that applies to x (breakpoints belong to the upper segment)."""
        index = np.searchsorted(np.asarray(self.breakpoints, dtype=np.float64), x, side="right")
        return int(index) if np.ndim(index) == 0 else index

    def __call__(self, x: Number) -> Number:
        x_arr = np.asarray(x, dtype=np.float64)
        if len(self.segments) == 1:
            result = np.asarray(self.segments[0].evaluate(x_arr), dtype=np.float64)
        else:
            index = np.searchsorted(np.asarray(self.breakpoints, dtype=np.float64), x_arr, side="right")
            choices = [np.asarray(s.evaluate(x_arr), dtype=np.float64) for s in self.segments]
            result = np.choose(index, choices)
        if result.ndim == 0:
            return float(result)
        return result

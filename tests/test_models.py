"""
Tests for reference function models and polynomial helpers.
"""
import math

import numpy as np
import pytest

from thermocouple_calculator.models import ExponentialTerm, ReferenceFunction, Segment
from thermocouple_calculator.utilities import OutOfRangeError, calc_equation, validate_range


def test_calc_equation_ascending_powers():
    """calc_equation sums z[i] * x^i."""
    assert calc_equation([1.0, 2.0, 3.0], 2.0) == 17.0
    assert calc_equation([5.0], 123.0) == 5.0
    np.testing.assert_allclose(calc_equation([1.0, 2.0, 3.0], np.array([0.0, 1.0, -1.0])), [1.0, 6.0, 2.0])


def test_exponential_term():
    term = ExponentialTerm(2.0, -0.5, 1.0)
    assert term.evaluate(1.0) == 2.0
    assert term.evaluate(3.0) == pytest.approx(2.0 * math.exp(-2.0))


def test_segment_adds_exponential():
    plain = Segment(None, (0.0, 1.0))
    bumped = Segment(None, (0.0, 1.0), ExponentialTerm(1.0, 0.0, 0.0))
    assert bumped.evaluate(3.0) == plain.evaluate(3.0) + 1.0


def test_reference_function_selects_segment():
    """Breakpoints are inclusive on the upper segment."""
    f = ReferenceFunction((
        Segment(None, (-1.0,)),
        Segment(0.0, (0.0, 1.0)),
        Segment(10.0, (100.0,)),
    ))
    assert f(-5.0) == -1.0
    assert f(0.0) == 0.0
    assert f(9.5) == 9.5
    assert f(10.0) == 100.0
    np.testing.assert_array_equal(f(np.array([-1.0, 2.0, 20.0])), [-1.0, 2.0, 100.0])
    assert f.segment_index(10.0) == 2
    np.testing.assert_array_equal(f.segment_index(np.array([-1.0, 0.0, 11.0])), [0, 1, 2])


def test_reference_function_keeps_shape():
    f = ReferenceFunction((Segment(None, (0.0, 2.0)),))
    grid = np.zeros((2, 3))
    assert f(grid).shape == (2, 3)
    assert isinstance(f(1), float)


@pytest.mark.parametrize(
    "segments",
    [
        (),
        (Segment(0.0, (1.0,)),),
        (Segment(None, (1.0,)), Segment(None, (2.0,))),
        (Segment(None, (1.0,)), Segment(5.0, (2.0,)), Segment(5.0, (3.0,))),
        (Segment(None, (1.0,)), Segment(5.0, (2.0,)), Segment(1.0, (3.0,))),
    ],
)
def test_reference_function_rejects_bad_segments(segments):
    with pytest.raises(ValueError):
        ReferenceFunction(segments)


def test_validate_range_passes_values_through():
    assert validate_range(5.0, (0.0, 10.0)) == 5.0
    values = np.array([0.0, 10.0])
    assert validate_range(values, (0.0, 10.0)) is values
    assert validate_range(np.array([]), (0.0, 1.0)).size == 0


def test_validate_range_rejects():
    with pytest.raises(OutOfRangeError, match=r"EMF 12 mV outside valid range \[0 mV, 10 mV\]") as excinfo:
        validate_range(12.0, (0.0, 10.0), "EMF", " mV")
    assert excinfo.value.valid_range == (0.0, 10.0)
    assert excinfo.value.value == 12.0
    with pytest.raises(OutOfRangeError, match="NaN"):
        validate_range([1.0, float("nan")], (0.0, 10.0))

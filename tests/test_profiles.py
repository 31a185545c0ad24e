"""
Tests for the thermocouple profile registry.
"""
import pytest

from thermocouple_calculator import ThermocoupleType, InvalidThermocoupleType
from thermocouple_calculator.models import ReferenceFunction
from thermocouple_calculator.profiles import (
    THERMOCOUPLE_PROFILES,
    SUPPORTED_TYPES,
    SOURCE_GOST,
    SOURCE_IEC,
    KEY_CANONICAL_NAME,
    KEY_SOURCE,
    KEY_FORWARD,
    KEY_INVERSE,
    KEY_TEMPERATURE_RANGE,
    KEY_EMF_RANGE,
    KEY_INVERSE_TEMPERATURE_RANGE,
    get_thermocouple_profile,
    parse_thermocouple_type,
)


def test_registry_covers_every_type():
    """Exactly the 13 standard types, in selector code order."""
    assert SUPPORTED_TYPES == tuple(ThermocoupleType)
    assert len(THERMOCOUPLE_PROFILES) == 13
    assert [t.code for t in SUPPORTED_TYPES] == list(range(13))


@pytest.mark.parametrize("tc_type", SUPPORTED_TYPES, ids=lambda t: t.value)
def test_profile_is_complete(tc_type):
    profile = THERMOCOUPLE_PROFILES[tc_type]
    assert profile[KEY_CANONICAL_NAME] == tc_type.value
    assert isinstance(profile[KEY_FORWARD], ReferenceFunction)
    assert isinstance(profile[KEY_INVERSE], ReferenceFunction)
    t_low, t_high = profile[KEY_TEMPERATURE_RANGE]
    i_low, i_high = profile[KEY_INVERSE_TEMPERATURE_RANGE]
    e_low, e_high = profile[KEY_EMF_RANGE]
    assert t_low < t_high and e_low < e_high
    assert t_low <= i_low < i_high <= t_high


def test_sources():
    gost_only = {ThermocoupleType.A1, ThermocoupleType.A2, ThermocoupleType.A3, ThermocoupleType.L, ThermocoupleType.M}
    for tc_type, profile in THERMOCOUPLE_PROFILES.items():
        assert profile[KEY_SOURCE] == (SOURCE_GOST if tc_type in gost_only else SOURCE_IEC)


@pytest.mark.parametrize(
    "selector, expected",
    [
        (ThermocoupleType.L, ThermocoupleType.L),
        ("K", ThermocoupleType.K),
        ("k", ThermocoupleType.K),
        (" n ", ThermocoupleType.N),
        ("A-1", ThermocoupleType.A1),
        ("a1", ThermocoupleType.A1),
        ("A_2", ThermocoupleType.A2),
        ("A3", ThermocoupleType.A3),
        (0, ThermocoupleType.R),
        (6, ThermocoupleType.K),
        (12, ThermocoupleType.M),
    ],
)
def test_parse_thermocouple_type(selector, expected):
    assert parse_thermocouple_type(selector) is expected


@pytest.mark.parametrize("selector", ["Z", "A-4", "KK", 13, -1, 2.0, None, False, b"K"])
def test_parse_rejects_unknown_selectors(selector):
    with pytest.raises(InvalidThermocoupleType, match="Supported types: R, S, B"):
        parse_thermocouple_type(selector)


def test_invalid_type_is_value_error():
    """Callers catching ValueError also catch an unknown type."""
    with pytest.raises(ValueError):
        get_thermocouple_profile("nope")


def test_get_profile_returns_copy():
    profile = get_thermocouple_profile("K")
    profile[KEY_EMF_RANGE] = (0.0, 1.0)
    assert THERMOCOUPLE_PROFILES[ThermocoupleType.K][KEY_EMF_RANGE] == (-5.891, 54.886)


def test_type_k_forward_has_exponential_above_zero():
    forward = THERMOCOUPLE_PROFILES[ThermocoupleType.K][KEY_FORWARD]
    assert forward.segments[0].exponential is None
    assert forward.segments[1].exponential is not None
    assert forward.breakpoints == (0.0,)


@pytest.mark.parametrize(
    "tc_type, breakpoints",
    [
        (ThermocoupleType.R, (1.923, 11.361, 19.739)),
        (ThermocoupleType.S, (1.874, 10.332, 17.536)),
        (ThermocoupleType.B, (2.431,)),
        (ThermocoupleType.J, (0.0, 42.919)),
        (ThermocoupleType.K, (0.0, 20.644)),
        (ThermocoupleType.N, (0.0, 20.613)),
        (ThermocoupleType.A1, ()),
    ],
)
def test_inverse_breakpoints(tc_type, breakpoints):
    assert THERMOCOUPLE_PROFILES[tc_type][KEY_INVERSE].breakpoints == breakpoints

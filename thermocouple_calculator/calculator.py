"""Convert between temperature (°C) and thermoelectric EMF (mV); compensate for the cold junction."""

import logging
from typing import Any, Dict, List, NoReturn
import numpy as np

from .models import Number, ReferenceFunction
from .profiles import (
    THERMOCOUPLE_PROFILES,
    SUPPORTED_TYPES,
    InvalidThermocoupleType,
    parse_thermocouple_type,
    KEY_CANONICAL_NAME,
    KEY_FORWARD,
    KEY_INVERSE,
    KEY_TEMPERATURE_RANGE,
    KEY_EMF_RANGE,
    FORWARD_R, INVERSE_R,
    FORWARD_S, INVERSE_S,
    FORWARD_B, INVERSE_B,
    FORWARD_J, INVERSE_J,
    FORWARD_T, INVERSE_T,
    FORWARD_E, INVERSE_E,
    FORWARD_K, INVERSE_K,
    FORWARD_N, INVERSE_N,
    FORWARD_A1, INVERSE_A1,
    FORWARD_A2, INVERSE_A2,
    FORWARD_A3, INVERSE_A3,
    FORWARD_L, INVERSE_L,
    FORWARD_M, INVERSE_M,
)
from .utilities import OutOfRangeError, validate_range

logger = logging.getLogger(__name__)

# Reference tables are published to 1 µV, so EMF bounds are checked with that slack.
EMF_RANGE_TOLERANCE = 0.001

# Per-type reference functions: temperature (°C) -> EMF (mV) and EMF (mV) -> temperature (°C)
temperature_to_emf_r, emf_to_temperature_r = FORWARD_R, INVERSE_R
temperature_to_emf_s, emf_to_temperature_s = FORWARD_S, INVERSE_S
temperature_to_emf_b, emf_to_temperature_b = FORWARD_B, INVERSE_B
temperature_to_emf_j, emf_to_temperature_j = FORWARD_J, INVERSE_J
temperature_to_emf_t, emf_to_temperature_t = FORWARD_T, INVERSE_T
temperature_to_emf_e, emf_to_temperature_e = FORWARD_E, INVERSE_E
temperature_to_emf_k, emf_to_temperature_k = FORWARD_K, INVERSE_K
temperature_to_emf_n, emf_to_temperature_n = FORWARD_N, INVERSE_N
temperature_to_emf_a1, emf_to_temperature_a1 = FORWARD_A1, INVERSE_A1
temperature_to_emf_a2, emf_to_temperature_a2 = FORWARD_A2, INVERSE_A2
temperature_to_emf_a3, emf_to_temperature_a3 = FORWARD_A3, INVERSE_A3
temperature_to_emf_l, emf_to_temperature_l = FORWARD_L, INVERSE_L
temperature_to_emf_m, emf_to_temperature_m = FORWARD_M, INVERSE_M


def thermocouple_fault(selector: Any = None) -> NoReturn:
    """
    Called when the dispatcher receives a selector outside the supported set.
    This is a programming error, never a normal result: log it and raise.
    """
    logger.error("No reference functions for thermocouple type selector %r", selector)
    raise InvalidThermocoupleType(
        f"No reference functions for thermocouple type selector {selector!r}.",
        selector=selector,
    )


def _lookup_profile(selector: Any) -> Dict[str, Any]:
    try:
        tc_type = parse_thermocouple_type(selector)
    except InvalidThermocoupleType:
        tc_type = None
    profile = THERMOCOUPLE_PROFILES.get(tc_type) if tc_type is not None else None
    if profile is None:
        thermocouple_fault(selector)
    return profile


def _check_temperature(profile: Dict[str, Any], temperature: Number) -> None:
    validate_range(temperature, profile[KEY_TEMPERATURE_RANGE], "Temperature", " °C")


def _check_emf(profile: Dict[str, Any], emf: Number) -> None:
    low, high = profile[KEY_EMF_RANGE]
    try:
        validate_range(emf, (low - EMF_RANGE_TOLERANCE, high + EMF_RANGE_TOLERANCE), "EMF", " mV")
    except OutOfRangeError as exc:
        raise OutOfRangeError(
            f"EMF outside valid range [{low:g} mV, {high:g} mV] for type {profile[KEY_CANONICAL_NAME]}",
            value=emf,
            valid_range=(low, high),
        ) from exc


def forward_function(tc_type: Any) -> ReferenceFunction:
    """Return the temperature (°C) -> EMF (mV) reference function for a type."""
    return _lookup_profile(tc_type)[KEY_FORWARD]


def inverse_function(tc_type: Any) -> ReferenceFunction:
    """Return the EMF (mV) -> temperature (°C) reference function for a type."""
    return _lookup_profile(tc_type)[KEY_INVERSE]


def temperature_to_emf(tc_type: Any, temperature: Number, check_range: bool = False) -> Number:
    """EMF (mV) of a thermocouple with its reference junction at 0 °C."""
    profile = _lookup_profile(tc_type)
    if check_range:
        _check_temperature(profile, temperature)
    return profile[KEY_FORWARD](temperature)


def emf_to_temperature(tc_type: Any, emf: Number, check_range: bool = False) -> Number:
    """Temperature (°C) for an EMF (mV) measured against a 0 °C reference junction."""
    profile = _lookup_profile(tc_type)
    if check_range:
        _check_emf(profile, emf)
    return profile[KEY_INVERSE](emf)


def get_temperature(
    cold_junction_temperature: Number,
    emf: Number,
    tc_type: Any,
    check_range: bool = False,
) -> Number:
    """
    Hot junction temperature (°C) from a measured EMF (mV) and the cold
    junction temperature (°C).

    The cold junction's own EMF is computed with the forward reference
    function, added to the measured EMF, and the sum is converted back with
    the type's inverse function.
    """
    profile = _lookup_profile(tc_type)
    if check_range:
        _check_temperature(profile, cold_junction_temperature)
    emf_cold = profile[KEY_FORWARD](cold_junction_temperature)
    emf_total = np.add(emf, emf_cold)
    if check_range:
        _check_emf(profile, emf_total)
    logger.debug(
        "Type %s: cold junction %s °C -> %s mV, compensated EMF %s mV",
        profile[KEY_CANONICAL_NAME], cold_junction_temperature, emf_cold, emf_total,
    )
    return profile[KEY_INVERSE](emf_total)


class ThermocoupleCalculator:
    """Conversions bound to one thermocouple type."""

    def __init__(self, tc_type: Any, check_range: bool = False):
        self.profile = _lookup_profile(tc_type)
        self.tc_type = parse_thermocouple_type(tc_type)
        self.check_range = check_range

    def __repr__(self):
        return f"ThermocoupleCalculator(tc_type={self.tc_type.value!r}, check_range={self.check_range})"

    @property
    def temperature_range(self):
        return self.profile[KEY_TEMPERATURE_RANGE]

    @property
    def emf_range(self):
        return self.profile[KEY_EMF_RANGE]

    def temperature_to_emf(self, temperature: Number) -> Number:
        return temperature_to_emf(self.tc_type, temperature, check_range=self.check_range)

    def emf_to_temperature(self, emf: Number) -> Number:
        return emf_to_temperature(self.tc_type, emf, check_range=self.check_range)

    def get_temperature(self, cold_junction_temperature: Number, emf: Number) -> Number:
        """Hot junction temperature (°C); see get_temperature()."""
        return get_temperature(cold_junction_temperature, emf, self.tc_type, check_range=self.check_range)

    def validate_emf(self, emf: Number) -> bool:
        """Return True if emf lies within the inverse function's range."""
        try:
            _check_emf(self.profile, emf)
            return True
        except OutOfRangeError:
            return False

    @staticmethod
    def get_supported_types() -> List[str]:
        return [t.value for t in SUPPORTED_TYPES]

"""
thermocouple_calculator - temperature / EMF conversion for standard thermocouples

Reference functions follow GOST R 8.585-2001 (types R, S, B, J, T, E, K, N
are identical to IEC 60584-1 / NIST ITS-90; types A-1, A-2, A-3, L, M are
GOST-only).

Main usage:
    from thermocouple_calculator import get_temperature, ThermocoupleType

    # Type K probe reading 4.096 mV with the connector block at 25 °C
    hot = get_temperature(25.0, 4.096, ThermocoupleType.K)
    print(f"Hot junction: {hot:.2f} °C")
"""

import logging

__version__ = "0.1.0"

from .models import ThermocoupleType, ReferenceFunction, Segment, ExponentialTerm
from .profiles import (
    THERMOCOUPLE_PROFILES,
    SUPPORTED_TYPES,
    InvalidThermocoupleType,
    get_thermocouple_profile,
    parse_thermocouple_type,
)
from .utilities import OutOfRangeError
from .calculator import (
    ThermocoupleCalculator,
    get_temperature,
    temperature_to_emf,
    emf_to_temperature,
    forward_function,
    inverse_function,
    thermocouple_fault,
    temperature_to_emf_r, emf_to_temperature_r,
    temperature_to_emf_s, emf_to_temperature_s,
    temperature_to_emf_b, emf_to_temperature_b,
    temperature_to_emf_j, emf_to_temperature_j,
    temperature_to_emf_t, emf_to_temperature_t,
    temperature_to_emf_e, emf_to_temperature_e,
    temperature_to_emf_k, emf_to_temperature_k,
    temperature_to_emf_n, emf_to_temperature_n,
    temperature_to_emf_a1, emf_to_temperature_a1,
    temperature_to_emf_a2, emf_to_temperature_a2,
    temperature_to_emf_a3, emf_to_temperature_a3,
    temperature_to_emf_l, emf_to_temperature_l,
    temperature_to_emf_m, emf_to_temperature_m,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "get_temperature",  # Main entry point
    "temperature_to_emf",
    "emf_to_temperature",
    "forward_function",
    "inverse_function",
    "thermocouple_fault",
    "ThermocoupleCalculator",
    "ThermocoupleType",
    "ReferenceFunction",
    "Segment",
    "ExponentialTerm",
    "THERMOCOUPLE_PROFILES",
    "SUPPORTED_TYPES",
    "InvalidThermocoupleType",
    "OutOfRangeError",
    "get_thermocouple_profile",
    "parse_thermocouple_type",
] + [
    f"{direction}_{t.name.lower()}"
    for t in SUPPORTED_TYPES
    for direction in ("temperature_to_emf", "emf_to_temperature")
]

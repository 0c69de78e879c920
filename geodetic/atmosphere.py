"""
Lower-atmosphere properties from the U.S. Standard Atmosphere, 1976.

The standard defines temperature as piecewise linear in geopotential altitude
across seven layers between sea level and 86 km (geometric); above that the
model changes form and is not covered here. Speed of sound and Mach number are
derived from the layer temperature.

Altitudes passed to get_strata and molecular_weight are kilometers; those passed
to get_speed_of_sound and meters_per_second_to_mach are meters.

References:
    U.S. Standard Atmosphere, 1976. NOAA-S/T 76-1562, NASA-TM-X-74335.
"""

__all__ = ['get_speed_of_sound', 'get_strata', 'meters_per_second_to_mach', 'molecular_weight']

import math

import numpy as np
from pydantic import FiniteFloat, validate_call

from geodetic.utils.logging import LOGGER

_EARTH_RADIUS_KM = 6356.766  # Effective earth radius for geopotential altitude
_GAS_CONSTANT = 8314.32  # Universal gas constant (J / kmol K)
_MOLECULAR_WEIGHT = 28.9644  # Sea-level mean molecular weight (kg / kmol)
_HEAT_CAPACITY_RATIO = 1.4

_MIN_ALTITUDE_KM = -5.0
_MAX_ALTITUDE_KM = 86.0  # Geometric; 84.852 km geopotential

# Layer bases (geopotential km), base temperatures (K) and lapse rates (K / km)
_LAYER_BASES = np.array([0.0, 11.0, 20.0, 32.0, 47.0, 51.0, 71.0])
_LAYER_TEMPERATURES = np.array([288.15, 216.65, 216.65, 228.65, 270.65, 270.65, 214.65])
_LAYER_LAPSE_RATES = np.array([-6.5, 0.0, 1.0, 2.8, 0.0, -2.8, -2.0])

# Upper bound (geometric km, inclusive) of each named stratum
_STRATA = (
    (11.0, 'troposphere'),
    (50.0, 'stratosphere'),
    (86.0, 'mesosphere'),
    (600.0, 'thermosphere'),
)


def _check_modelled(altitude_km: float) -> None:
    if not _MIN_ALTITUDE_KM <= altitude_km <= _MAX_ALTITUDE_KM:
        raise ValueError(
            f'Altitude {altitude_km} km is outside the modelled range '
            f'({_MIN_ALTITUDE_KM} to {_MAX_ALTITUDE_KM} km)'
        )


def _geopotential_altitude(altitude_km: float) -> float:
    """Converts a geometric altitude to a geopotential altitude, both in km"""
    return _EARTH_RADIUS_KM * altitude_km / (_EARTH_RADIUS_KM + altitude_km)


def _temperature(altitude_km: float) -> float:
    """Kinetic temperature (K) at a geometric altitude in km"""
    _check_modelled(altitude_km)
    h = _geopotential_altitude(altitude_km)
    layer = max(int(np.searchsorted(_LAYER_BASES, h, side='right')) - 1, 0)

    return float(_LAYER_TEMPERATURES[layer] + _LAYER_LAPSE_RATES[layer] * (h - _LAYER_BASES[layer]))


@validate_call
def get_strata(altitude: FiniteFloat) -> str:
    """
    Names the layer of the atmosphere an altitude falls in.

    Args:
        altitude:
            Geometric altitude in kilometers. Each boundary belongs to the
            lower layer, so 11 km is still troposphere.

    Returns:
        One of 'troposphere', 'stratosphere', 'mesosphere', 'thermosphere'
        or 'exosphere'
    """
    for upper, name in _STRATA:
        if altitude <= upper:
            return name

    return 'exosphere'


@validate_call
def molecular_weight(altitude: FiniteFloat) -> float:
    """
    Mean molecular weight of air (kg / kmol) at a geometric altitude in kilometers.

    The 1976 standard holds the sea-level composition constant up to 86 km,
    so the value is 28.9644 across the whole modelled range. Raises ValueError
    outside it.
    """
    _check_modelled(altitude)
    return _MOLECULAR_WEIGHT


@validate_call
def get_speed_of_sound(altitude: FiniteFloat = 0.0) -> float:
    """
    Speed of sound in air at an altitude.

    Args:
        altitude:
            (Default 0) Geometric altitude in meters, from -5 km to 86 km

    Returns:
        float, meters per second

    Raises:
        ValueError if the altitude is outside the modelled range

    Example:
        get_speed_of_sound(10000)  # 299.53
    """
    temperature = _temperature(altitude / 1000)
    LOGGER.debug('Temperature at %s m: %.2f K', altitude, temperature)

    return math.sqrt(_HEAT_CAPACITY_RATIO * _GAS_CONSTANT / _MOLECULAR_WEIGHT * temperature)


@validate_call
def meters_per_second_to_mach(speed: FiniteFloat, altitude: FiniteFloat = 0.0) -> float:
    """
    Converts an airspeed to a Mach number.

    Args:
        speed:
            Speed in meters per second

        altitude:
            (Default 0) Geometric altitude in meters

    Returns:
        float
    """
    return speed / get_speed_of_sound(altitude)


from geodetic._version import __version__  # noqa: F401
from geodetic.utils.logging import LOGGER
from geodetic.angles import (
    DegreesMinutes, DegreesMinutesSeconds, DegreesOnly, classify, convert_angle,
    to_decimal_degrees, to_degrees_decimal_minutes, to_degrees_minutes_seconds
)
from geodetic.atmosphere import (
    get_speed_of_sound, get_strata, meters_per_second_to_mach, molecular_weight
)
from geodetic.conversion import (
    to_cartesian, to_cartesian_array, to_geodetic, to_geodetic_array
)
from geodetic.coordinates import CartesianPosition, GeodeticPosition
from geodetic.datum import DATUMS, GRS80, WGS72, WGS84, Datum, get_datum
from geodetic.formats import GeospatialFormat


__all__ = [
    'CartesianPosition',
    'DATUMS',
    'Datum',
    'DegreesMinutes',
    'DegreesMinutesSeconds',
    'DegreesOnly',
    'GRS80',
    'GeodeticPosition',
    'GeospatialFormat',
    'LOGGER',
    'WGS72',
    'WGS84',
    'classify',
    'convert_angle',
    'get_datum',
    'get_speed_of_sound',
    'get_strata',
    'meters_per_second_to_mach',
    'molecular_weight',
    'to_cartesian',
    'to_cartesian_array',
    'to_decimal_degrees',
    'to_degrees_decimal_minutes',
    'to_degrees_minutes_seconds',
    'to_geodetic',
    'to_geodetic_array',
]

"""
Module for converting positions between the geodetic (latitude, longitude, height)
and earth-centered, earth-fixed cartesian (x, y, z) frames
"""

__all__ = [
    'to_cartesian', 'to_cartesian_array', 'to_geodetic', 'to_geodetic_array',
]

import math
from typing import Optional

import numpy as np

from geodetic._const import HEIGHT_PRECISION
from geodetic.coordinates import CartesianPosition, GeodeticPosition
from geodetic.datum import WGS84, Datum
from geodetic.utils.functions import round_half_up
from geodetic.utils.logging import LOGGER


def to_cartesian(
    latitude: float,
    longitude: float,
    height: Optional[float] = 0.0,
    datum: Optional[Datum] = None,
) -> CartesianPosition:
    """
    Convert geodetic latitude/longitude/height to cartesian x/y/z.

    Args:
        latitude:
            Latitude, in degrees

        longitude:
            Longitude, in degrees

        height: (float)
            (Default 0.0) Height above the ellipsoid, in meters

        datum: (Datum)
            (Default WGS84) The reference ellipsoid

    Returns:
        CartesianPosition, in meters
    """
    datum = datum or WGS84
    h = height or 0.0
    lat, lon = math.radians(latitude), math.radians(longitude)
    cos_lat, sin_lat = math.cos(lat), math.sin(lat)

    # Prime vertical radius of curvature
    n = datum.semi_major_axis / math.sqrt(
        1 - datum.first_eccentricity_squared * sin_lat ** 2
    )
    return CartesianPosition(
        (n + h) * cos_lat * math.cos(lon),
        (n + h) * cos_lat * math.sin(lon),
        ((1 - datum.first_eccentricity_squared) * n + h) * sin_lat,
    )


def to_geodetic(
    x: float,
    y: float,
    z: float,
    datum: Optional[Datum] = None,
) -> GeodeticPosition:
    """
    Convert cartesian x/y/z to geodetic latitude/longitude/height, without iterating.

    Uses Vermeille's closed-form solution, with the branch for points inside the
    evolute of the meridian ellipse (within ~43km of the earth's center, on the
    equatorial plane). Points on the polar axis are special-cased:
    latitude is +/-90 (by the sign of z), longitude 0, height |z| - b.

    See:
        Vermeille, H. (2004) Computing geodetic coordinates from geocentric
        coordinates. Journal of Geodesy 78, 94-95.

    Args:
        x:
            Meters along the axis through the prime meridian at the equator

        y:
            Meters along the axis through 90 degrees east at the equator

        z:
            Meters along the polar axis, positive north

        datum: (Datum)
            (Default WGS84) The reference ellipsoid

    Returns:
        GeodeticPosition, with height rounded to 0.1 meters
    """
    datum = datum or WGS84
    a, b = datum.semi_major_axis, datum.semi_minor_axis
    e2 = datum.first_eccentricity_squared
    e4 = e2 ** 2
    e2m = 1 - e2
    r_xy = math.hypot(x, y)

    if r_xy == 0:
        LOGGER.debug('(%s, %s, %s) lies on the polar axis', x, y, z)
        return GeodeticPosition(
            90.0 if z >= 0 else -90.0,
            0.0,
            round_half_up(abs(z) - b, HEIGHT_PRECISION),
        )

    p = (r_xy / a) ** 2
    q = e2m * (z / a) ** 2
    r = (p + q - e4) / 6

    if e4 * q == 0 and r <= 0:
        # On the equatorial plane, inside the evolute
        zz = math.sqrt((e4 - p) / e2m)
        xx = math.sqrt(p)
        hyp = math.hypot(zz, xx)
        latitude = math.atan2(math.copysign(zz, z), xx)
        height = -a * e2m * hyp / e2
    else:
        s = e4 * p * q / 4
        r2 = r ** 2
        r3 = r * r2
        disc = s * (2 * r3 + s)
        u = r
        if disc >= 0:
            t3 = s + r3
            t3 += -math.sqrt(disc) if t3 < 0 else math.sqrt(disc)
            t = math.copysign(abs(t3) ** (1 / 3), t3)
            u += t + (r2 / t if t != 0 else 0)
        else:
            # Inside the evolute; three real roots, take the one for this quadrant
            ang = math.atan2(math.sqrt(-disc), -(s + r3))
            u += 2 * r * math.cos(ang / 3)

        v = math.sqrt(u ** 2 + e4 * q)
        uv = e4 * q / (v - u) if u < 0 else u + v
        w = max(0.0, e2 * (uv - q) / (2 * v))
        k = uv / (math.sqrt(uv + w ** 2) + w)
        d = k * r_xy / (k + e2)
        latitude = math.atan2(z / k, r_xy / (k + e2))
        height = (1 - e2m / k) * math.hypot(d, z)

    return GeodeticPosition(
        math.degrees(latitude),
        math.degrees(math.atan2(y, x)),
        round_half_up(height, HEIGHT_PRECISION),
    )


def _as_rows(positions, widths) -> np.ndarray:
    arr = np.asarray(positions, dtype=float)
    if arr.ndim != 2 or arr.shape[1] not in widths:
        raise ValueError(
            f'Expected an array of shape (N, {" or ".join(map(str, widths))}), got {arr.shape}'
        )
    return arr


def to_cartesian_array(positions, datum: Optional[Datum] = None) -> np.ndarray:
    """
    Vectorized form of to_cartesian.

    Args:
        positions:
            An (N, 2) or (N, 3) array-like of latitude, longitude[, height]

        datum: (Datum)
            (Default WGS84) The reference ellipsoid

    Returns:
        (N, 3) np.ndarray of x, y, z
    """
    datum = datum or WGS84
    arr = _as_rows(positions, (2, 3))
    lat, lon = np.radians(arr[:, 0]), np.radians(arr[:, 1])
    h = arr[:, 2] if arr.shape[1] == 3 else np.zeros(len(arr))

    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    n = datum.semi_major_axis / np.sqrt(1 - datum.first_eccentricity_squared * sin_lat ** 2)
    return np.column_stack([
        (n + h) * cos_lat * np.cos(lon),
        (n + h) * cos_lat * np.sin(lon),
        ((1 - datum.first_eccentricity_squared) * n + h) * sin_lat,
    ])


def to_geodetic_array(positions, datum: Optional[Datum] = None) -> np.ndarray:
    """
    Row-wise form of to_geodetic.

    Args:
        positions:
            An (N, 3) array-like of x, y, z

        datum: (Datum)
            (Default WGS84) The reference ellipsoid

    Returns:
        (N, 3) np.ndarray of latitude, longitude, height
    """
    arr = _as_rows(positions, (3,))
    out = np.empty_like(arr)
    for idx, (x, y, z) in enumerate(arr):
        out[idx] = to_geodetic(x, y, z, datum)

    return out

"""
Value types for positions expressed in the geodetic and cartesian frames
"""

__all__ = ['CartesianPosition', 'GeodeticPosition']

from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from geodetic.datum import Datum


class GeodeticPosition(NamedTuple):
    """
    A position on (or above/below) a reference ellipsoid.

    Latitude is expected in [-90, 90] and longitude in (-180, 180], but neither
    is enforced or normalized. Height is in meters and may be negative.
    """
    latitude: float
    longitude: float
    height: float = 0.0

    def to_cartesian(self, datum: Optional[Datum] = None) -> 'CartesianPosition':
        """Converts this position to earth-centered, earth-fixed x/y/z"""
        from geodetic.conversion import to_cartesian  # pylint: disable=import-outside-toplevel
        return to_cartesian(self.latitude, self.longitude, self.height, datum)

    def to_dms(self) -> Tuple[List[float], List[float]]:
        """
        Converts latitude and longitude to [degrees, minutes, seconds].

        Returns:
            (latitude, longitude), each as [degrees, minutes, seconds]
        """
        from geodetic.angles import to_degrees_minutes_seconds  # pylint: disable=import-outside-toplevel
        return (
            to_degrees_minutes_seconds([self.latitude, 0, 0]),  # type: ignore
            to_degrees_minutes_seconds([self.longitude, 0, 0]),  # type: ignore
        )

    @classmethod
    def from_dms(
        cls,
        latitude: Union[Sequence[float], str],
        longitude: Union[Sequence[float], str],
        height: float = 0.0,
    ) -> 'GeodeticPosition':
        """
        Creates a GeodeticPosition from a pair of [degrees, minutes, seconds] angles.

        Args:
            latitude:
                The latitude, as [degrees, minutes, seconds] or "D M S"

            longitude:
                The longitude, as [degrees, minutes, seconds] or "D M S"

            height: (float)
                (Default 0.0) Height above the ellipsoid, in meters

        Returns:
            GeodeticPosition
        """
        from geodetic.angles import to_decimal_degrees  # pylint: disable=import-outside-toplevel
        lat, lon = to_decimal_degrees(latitude), to_decimal_degrees(longitude)
        if lat is None or lon is None:
            raise ValueError(f'Could not interpret ({latitude!r}, {longitude!r}) as DMS angles')

        return cls(lat, lon, height)


class CartesianPosition(NamedTuple):
    """An earth-centered, earth-fixed position, in meters"""
    x: float
    y: float
    z: float

    def to_geodetic(self, datum: Optional[Datum] = None) -> GeodeticPosition:
        """Converts this position to latitude, longitude and height"""
        from geodetic.conversion import to_geodetic  # pylint: disable=import-outside-toplevel
        return to_geodetic(self.x, self.y, self.z, datum)

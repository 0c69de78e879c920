"""
Reference ellipsoids (datums) used by the cartesian/geodetic transforms
"""

__all__ = ['DATUMS', 'Datum', 'GRS80', 'WGS72', 'WGS84', 'get_datum']

from dataclasses import dataclass, replace
import math
from types import MappingProxyType

from pydantic import PositiveFloat, validate_call

from geodetic._const import (
    GRS80_A, GRS80_F_INV, WGS72_A, WGS72_F_INV,
    WGS84_A, WGS84_AXIS_RATIO, WGS84_B, WGS84_E, WGS84_E2, WGS84_F, WGS84_F_INV,
)


@dataclass(frozen=True)
class Datum:
    """
    Immutable set of ellipsoid parameters.

    Instances built directly are taken at face value; use Datum.from_axes or
    Datum.from_flattening to derive a consistent set of parameters. The transforms
    never check a datum for consistency, so a mismatched set of fields produces
    wrong coordinates rather than an error.

    Attributes:
        semi_major_axis: equatorial radius, a (meters)
        semi_minor_axis: polar radius, b (meters)
        flattening: (a - b) / a
        flattening_inverse: 1 / f
        first_eccentricity_squared: (a^2 - b^2) / a^2
        linear_eccentricity: sqrt(a^2 - b^2) (meters)
        axis_ratio: b / a
        name: label used by the DATUMS registry
    """
    semi_major_axis: float
    semi_minor_axis: float
    flattening: float
    flattening_inverse: float
    first_eccentricity_squared: float
    linear_eccentricity: float
    axis_ratio: float
    name: str = 'custom'

    def __repr__(self):
        return f'<Datum {self.name} a={self.semi_major_axis} b={self.semi_minor_axis}>'

    @classmethod
    @validate_call
    def from_axes(
        cls,
        semi_major_axis: PositiveFloat,
        semi_minor_axis: PositiveFloat,
        name: str = 'custom',
    ):
        """
        Derives a datum from its semi-major and semi-minor axes.

        Args:
            semi_major_axis:
                The equatorial radius, in meters

            semi_minor_axis:
                The polar radius, in meters. May not exceed the semi-major axis.

            name: (str)
                (Default 'custom') A label for the datum

        Returns:
            Datum
        """
        a, b = semi_major_axis, semi_minor_axis
        if b > a:
            raise ValueError(
                f'semi-minor axis {b} must not be greater than semi-major axis {a}'
            )

        flattening = (a - b) / a
        return cls(
            semi_major_axis=a,
            semi_minor_axis=b,
            flattening=flattening,
            flattening_inverse=1 / flattening if flattening else math.inf,
            first_eccentricity_squared=(a ** 2 - b ** 2) / a ** 2,
            linear_eccentricity=math.sqrt(a ** 2 - b ** 2),
            axis_ratio=b / a,
            name=name,
        )

    @classmethod
    @validate_call
    def from_flattening(
        cls,
        semi_major_axis: PositiveFloat,
        flattening_inverse: PositiveFloat,
        name: str = 'custom',
    ):
        """
        Derives a datum from its semi-major axis and inverse flattening, the
        form most ellipsoids are published in.

        Args:
            semi_major_axis:
                The equatorial radius, in meters

            flattening_inverse:
                1/f, e.g. 298.257223563 for WGS84. Must be greater than 1.

            name: (str)
                (Default 'custom') A label for the datum

        Returns:
            Datum
        """
        if flattening_inverse <= 1:
            raise ValueError(f'inverse flattening must be greater than 1, got {flattening_inverse}')

        datum = cls.from_axes(
            semi_major_axis,
            semi_major_axis * (1 - 1 / flattening_inverse),
            name,
        )
        # Keep the published value rather than the round-tripped one
        return replace(datum, flattening_inverse=flattening_inverse)


# World Geodetic System 1984, as published (values are not re-derived)
WGS84 = Datum(
    semi_major_axis=WGS84_A,
    semi_minor_axis=WGS84_B,
    flattening=WGS84_F,
    flattening_inverse=WGS84_F_INV,
    first_eccentricity_squared=WGS84_E2,
    linear_eccentricity=WGS84_E,
    axis_ratio=WGS84_AXIS_RATIO,
    name='WGS84',
)
GRS80 = Datum.from_flattening(GRS80_A, GRS80_F_INV, name='GRS80')
WGS72 = Datum.from_flattening(WGS72_A, WGS72_F_INV, name='WGS72')

DATUMS = MappingProxyType({
    datum.name: datum for datum in (WGS84, GRS80, WGS72)
})


def get_datum(name: str) -> Datum:
    """
    Looks up a catalogued datum by name (case-insensitive).

    Args:
        name:
            The datum name, e.g. 'WGS84'

    Returns:
        Datum
    """
    for key, datum in DATUMS.items():
        if key.lower() == name.lower():
            return datum

    raise KeyError(f"Unknown datum '{name}'. Options: {list(DATUMS.keys())}")

"""Names for the representations a geospatial value can be expressed in"""

__all__ = ['GeospatialFormat']

from enum import Enum


class GeospatialFormat(str, Enum):
    """
    Tags which representation a value is in. Members compare equal to their
    string values, e.g. GeospatialFormat.DECIMAL_DEGREES == 'DecimalDegrees'
    """
    CARTESIAN = 'Cartesian'
    DEGREES_MINUTES_SECONDS = 'DegreesMinuteSeconds'
    DEGREES_DECIMAL_MINUTES = 'DegreesDecimalMinutes'
    DECIMAL_DEGREES = 'DecimalDegrees'
    RADIAN_DEGREES = 'RadianDegrees'

    def __str__(self):
        return self.value

"""
Constants declarations for geodetic
"""

# Angular units
MINUTES_PER_DEGREE = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_DEGREE = MINUTES_PER_DEGREE * SECONDS_PER_MINUTE

# Decimal places kept on output seconds/minutes
TEN_THOUSANDTHS = 4

# Decimal places kept on output heights (meters)
HEIGHT_PRECISION = 1

# Slots in a positional [degrees, minutes, seconds] angle
GEOSPATIAL_VALUE_LENGTH = 3

# WGS84 Ellipsoid Constants
# https://earth-info.nga.mil/php/download.php?file=coord-wgs84
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.3142  # Semi-minor axis (meters)
WGS84_F = 0.0033528106718309896  # Flattening
WGS84_F_INV = 298.257223563  # Inverse flattening
WGS84_E2 = 0.006694380004260827  # First eccentricity squared
WGS84_E = 521854.00842339  # Linear eccentricity (meters)
WGS84_AXIS_RATIO = 0.996647189335  # b/a

# Other catalogued ellipsoids, defined by (a, 1/f)
GRS80_A = 6378137.0
GRS80_F_INV = 298.257222101
WGS72_A = 6378135.0
WGS72_F_INV = 298.26

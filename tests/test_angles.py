import logging
import math

import numpy as np
import pytest
from pytest import approx

from geodetic.angles import *
from geodetic.formats import GeospatialFormat


def test_classify():
    assert isinstance(classify([32.8303, 0, 0]), DegreesOnly)
    assert classify([32.8303, 0, 0]) == DegreesOnly(32.8303)

    assert isinstance(classify([32, 49.818, 0]), DegreesMinutes)
    assert classify([32, 49.818, 0]) == DegreesMinutes(32, 49.818)

    assert isinstance(classify([32, 49, 49.08]), DegreesMinutesSeconds)
    assert isinstance(classify([0, 0, 1]), DegreesMinutesSeconds)
    assert isinstance(classify((-1, 0.5, 0)), DegreesMinutes)
    assert isinstance(classify(np.array([1., 2., 0.])), DegreesMinutes)

    # All-zero angles are decimal degrees
    assert isinstance(classify([0, 0, 0]), DegreesOnly)
    assert classify([0, 0, 0]) == DegreesOnly(0)

    # Tagged values pass through
    assert classify(DegreesMinutes(32, 0)) == DegreesMinutes(32, 0)
    assert isinstance(classify(DegreesMinutes(32, 0)), DegreesMinutes)


def test_classify_invalid():
    assert classify([1, 2]) is None
    assert classify([1, 2, 3, 4]) is None
    assert classify('123') is None
    assert classify('1 2 3') is None
    assert classify(None) is None
    assert classify(32.5) is None
    assert classify({1, 2, 3}) is None
    assert classify([1, '2', 3]) is None
    assert classify([True, 0, 0]) is None
    assert classify([math.nan, 0, 0]) is None
    assert classify([1, math.inf, 0]) is None
    assert classify(np.zeros((3, 1))) is None
    assert classify(DegreesOnly('32')) is None


def test_to_degrees_minutes_seconds():
    assert to_degrees_minutes_seconds([32.8303, 0, 0]) == [32, 49, 49.08]
    assert to_degrees_minutes_seconds([32, 49.818, 0]) == [32, 49, 49.08]
    assert to_degrees_minutes_seconds([32, 49, 49.08]) == [32, 49, 49.08]
    assert to_degrees_minutes_seconds(DegreesMinutes(32, 49.818)) == [32, 49, 49.08]
    assert to_degrees_minutes_seconds(DegreesOnly(32.8303)) == [32, 49, 49.08]
    assert to_degrees_minutes_seconds([0, 0, 0]) == [0, 0, 0]
    assert to_degrees_minutes_seconds([180, 0, 0]) == [180, 0, 0]

    degrees, minutes, seconds = to_degrees_minutes_seconds([32.8303, 0, 0])
    assert isinstance(degrees, int)
    assert isinstance(minutes, int)
    assert isinstance(seconds, float)

    # Seconds are kept to four decimal places
    assert to_degrees_minutes_seconds([0.123456789, 0, 0]) == [0, 7, 24.4444]


def test_to_degrees_minutes_seconds_sign():
    assert to_degrees_minutes_seconds([-32.8303, 0, 0]) == [-32, 49, 49.08]
    assert to_degrees_minutes_seconds([-32, 49.818, 0]) == [-32, 49, 49.08]
    assert to_degrees_minutes_seconds([-32, 49, 49.08]) == [-32, 49, 49.08]

    # The sign moves to the most significant nonzero part
    assert to_degrees_minutes_seconds([-0.5, 0, 0]) == [0, -30, 0]
    assert to_degrees_minutes_seconds([-0.01, 0, 0]) == [0, 0, -36]
    assert to_degrees_minutes_seconds([0, -30.5, 0]) == [0, -30, 30]

    # Negative zero degrees signs the whole angle
    assert to_degrees_minutes_seconds([-0.0, 30, 0]) == [0, -30, 0]
    assert to_degrees_minutes_seconds([-0.0, 0, 36]) == [0, 0, -36]


def test_to_degrees_minutes_seconds_carry():
    # Seconds which round up to 60 carry into minutes, and minutes into degrees
    assert to_degrees_minutes_seconds([10.9999999999, 0, 0]) == [11, 0, 0]
    assert to_degrees_minutes_seconds([10, 59.9999999999, 0]) == [11, 0, 0]
    assert to_degrees_minutes_seconds([-10, 59.9999999999, 0]) == [-11, 0, 0]


def test_to_degrees_minutes_seconds_passthrough():
    # DMS input keeps its slots: minutes and degrees truncated, seconds rounded
    assert to_degrees_minutes_seconds([10, 20, 75]) == [10, 20, 75]
    assert to_degrees_minutes_seconds([32, 49.5, 10]) == [32, 49, 10]
    assert to_degrees_minutes_seconds([10.7, 20, 5]) == [10, 20, 5]
    assert to_degrees_minutes_seconds([10, 59, 59.99999]) == [10, 59, 60.0]
    assert to_degrees_minutes_seconds([-10, 20, 75.123456]) == [-10, 20, 75.1235]
    assert to_degrees_minutes_seconds(DegreesMinutesSeconds(1, 2, 3.5)) == [1, 2, 3.5]


def test_to_degrees_minutes_seconds_precision():
    # Ten places by default; fewer places truncate the input
    assert to_degrees_minutes_seconds([32.8303, 0, 0], precision=2) == [32, 49, 48]


def test_to_degrees_minutes_seconds_invalid(caplog):
    caplog.set_level(logging.DEBUG, logger='geodetic')

    assert to_degrees_minutes_seconds([1, 2]) is None
    assert 'to_degrees_minutes_seconds rejected [1, 2]' in caplog.text

    assert to_degrees_minutes_seconds('32 49 49.08') is None
    assert to_degrees_minutes_seconds(['32', '49', '49.08']) is None
    assert to_degrees_minutes_seconds(None) is None
    assert to_degrees_minutes_seconds([math.nan, 0, 0]) is None


def test_to_degrees_decimal_minutes():
    assert to_degrees_decimal_minutes([32.8303, 0, 0]) == [32, 49.818, 0]
    assert to_degrees_decimal_minutes([32, 49, 49.08]) == [32, 49.818, 0]
    assert to_degrees_decimal_minutes([32, 49.818, 0]) == [32, 49.818, 0]
    assert to_degrees_decimal_minutes(DegreesMinutesSeconds(32, 49, 49.08)) == [32, 49.818, 0]
    assert to_degrees_decimal_minutes([0, 0, 0]) == [0, 0, 0]

    # Minutes are kept to four decimal places
    assert to_degrees_decimal_minutes([0.123456789, 0, 0]) == [0, 7.4074, 0]

    assert to_degrees_decimal_minutes([10, 59, 59.999]) == [11, 0, 0]


def test_to_degrees_decimal_minutes_sign():
    assert to_degrees_decimal_minutes([-32.8303, 0, 0]) == [-32, 49.818, 0]
    assert to_degrees_decimal_minutes([-32, 49, 49.08]) == [-32, 49.818, 0]
    assert to_degrees_decimal_minutes([0, -30.5, 0]) == [0, -30.5, 0]
    assert to_degrees_decimal_minutes([-0.5, 0, 0]) == [0, -30, 0]
    assert to_degrees_decimal_minutes([-0.0, 30.5, 0]) == [0, -30.5, 0]


def test_to_degrees_decimal_minutes_invalid():
    assert to_degrees_decimal_minutes([1, 2]) is None
    assert to_degrees_decimal_minutes('1 2 3') is None
    assert to_degrees_decimal_minutes([1, None, 3]) is None


def test_to_decimal_degrees():
    assert to_decimal_degrees(['32', '49', '49.08']) == approx(32.8303)
    assert to_decimal_degrees([32, 49, 49.08]) == approx(32.8303)
    assert to_decimal_degrees((32, 49.818, 0)) == approx(32.8303)
    assert to_decimal_degrees([32.8303, 0, 0]) == approx(32.8303)
    assert to_decimal_degrees('32 49 49.08') == approx(32.8303)
    assert to_decimal_degrees('  32   49 49.08 ') == approx(32.8303)
    assert to_decimal_degrees(np.array([32, 49, 49.08])) == approx(32.8303)
    assert to_decimal_degrees(DegreesMinutes(32, 30)) == 32.5
    assert to_decimal_degrees(DegreesOnly(-12.25)) == -12.25
    assert to_decimal_degrees([0, 0, 0]) == 0.

    assert isinstance(to_decimal_degrees(['1', '2', '3']), float)


def test_to_decimal_degrees_sign():
    assert to_decimal_degrees([-32, 49, 49.08]) == -to_decimal_degrees([32, 49, 49.08])
    assert to_decimal_degrees('-32 49 49.08') == approx(-32.8303)
    assert to_decimal_degrees(['-32', '49', '49.08']) == approx(-32.8303)

    # Zero degrees; sign comes from the minutes
    assert to_decimal_degrees([0, -30, 0]) == -0.5
    assert to_decimal_degrees([0, 0, -36]) == -0.01

    # Negative zero degrees signs the whole angle
    assert to_decimal_degrees('-0 30 0') == -0.5
    assert to_decimal_degrees(['-0', '30', '0']) == -0.5
    assert to_decimal_degrees([-0.0, 30, 0]) == -0.5
    assert to_decimal_degrees('-0 -30 0') == -0.5
    assert to_decimal_degrees('0 30 0') == 0.5


def test_to_decimal_degrees_minor_sign_warning(caplog, monkeypatch):
    monkeypatch.setattr('geodetic.utils.logging._WARNINGS', set())

    assert to_decimal_degrees([32, -30, 0]) == 32.5
    assert 'only the most significant nonzero component may carry a sign' in caplog.text

    caplog.clear()
    assert to_decimal_degrees([32, 30, -36]) == 32.51
    assert caplog.text == ''


def test_to_decimal_degrees_invalid():
    assert to_decimal_degrees('32 49') is None
    assert to_decimal_degrees('32 49 49.08 1') is None
    assert to_decimal_degrees('a b c') is None
    assert to_decimal_degrees(['32', 'x', '1']) is None
    assert to_decimal_degrees(['nan', '0', '0']) is None
    assert to_decimal_degrees([math.inf, 0, 0]) is None
    assert to_decimal_degrees([1, 2]) is None
    assert to_decimal_degrees(32.8303) is None
    assert to_decimal_degrees(None) is None
    assert to_decimal_degrees({'d': 32, 'm': 49, 's': 49.08}) is None
    assert to_decimal_degrees([True, 0, 0]) is None


def test_dms_composition():
    values = [x / 7 for x in range(-1260, 1261, 13)] + [-180., -0.0001, 0., 0.0001, 180.]
    for dd in values:
        assert to_decimal_degrees(to_degrees_minutes_seconds([dd, 0, 0])) == approx(dd, abs=1e-4)
        assert to_decimal_degrees(to_degrees_decimal_minutes([dd, 0, 0])) == approx(dd, abs=1e-4)


def test_cross_format_consistency():
    values = [
        [32.8303, 0, 0], [32, 49.818, 0], [32, 49, 49.08], [-32, 49, 49.08],
        [0, -59.999, 0], [179, 59, 59.9999], [-89, 0, 0.5], [0, 0, 0],
    ]
    for value in values:
        assert to_decimal_degrees(to_degrees_decimal_minutes(value)) == approx(
            to_decimal_degrees(to_degrees_minutes_seconds(value)), abs=1e-4
        )


def test_convert_angle():
    dms, ddm = GeospatialFormat.DEGREES_MINUTES_SECONDS, GeospatialFormat.DEGREES_DECIMAL_MINUTES
    dd, rad = GeospatialFormat.DECIMAL_DEGREES, GeospatialFormat.RADIAN_DEGREES

    assert convert_angle(32.8303, dd, dms) == [32, 49, 49.08]
    assert convert_angle(32.8303, dd, ddm) == [32, 49.818, 0]
    assert convert_angle(32.8303, dd, dd) == 32.8303
    assert convert_angle(180, dd, rad) == approx(math.pi)

    assert convert_angle([32, 49, 49.08], dms, dd) == approx(32.8303)
    assert convert_angle([32, 49, 49.08], dms, ddm) == [32, 49.818, 0]
    assert convert_angle([32, 49.818, 0], ddm, dms) == [32, 49, 49.08]
    assert convert_angle([180, 0, 0], dms, rad) == approx(math.pi)

    assert convert_angle(math.pi, rad, dd) == approx(180.)
    assert convert_angle(-math.pi / 2, rad, dms) == [-90, 0, 0]

    # Whitespace-delimited strings read the same for every target
    assert convert_angle('32 49 49.08', dms, dms) == [32, 49, 49.08]
    assert convert_angle('32 49 49.08', dms, ddm) == [32, 49.818, 0]
    assert convert_angle('32 49 49.08', dms, dd) == approx(32.8303)
    assert convert_angle('-32 49.818 0', ddm, dms) == [-32, 49, 49.08]
    assert convert_angle(['32', '49', '49.08'], dms, ddm) == [32, 49.818, 0]
    assert convert_angle(DegreesMinutes(32, 49.818), ddm, dms) == [32, 49, 49.08]

    # String format names are accepted
    assert convert_angle(32.8303, 'DecimalDegrees', 'DegreesMinuteSeconds') == [32, 49, 49.08]


def test_convert_angle_invalid():
    dms, dd = GeospatialFormat.DEGREES_MINUTES_SECONDS, GeospatialFormat.DECIMAL_DEGREES
    ddm = GeospatialFormat.DEGREES_DECIMAL_MINUTES

    assert convert_angle('32.8303', dd, dms) is None
    assert convert_angle(math.nan, dd, dms) is None
    assert convert_angle([32, 49], dms, dd) is None
    assert convert_angle('32 49', dms, ddm) is None
    assert convert_angle('32 x 49.08', dms, dms) is None

    with pytest.raises(ValueError):
        convert_angle(32.8303, dd, GeospatialFormat.CARTESIAN)

    with pytest.raises(ValueError):
        convert_angle(32.8303, 'Bogus', dms)

"""
Module for converting a single angle between degrees/minutes/seconds (DMS),
degrees/decimal-minutes (DDM) and decimal degrees (DD)

Angles are passed around as positional [degrees, minutes, seconds] arrays, where
trailing zero slots are unused: [32.8303, 0, 0] is decimal degrees,
[32, 49.818, 0] is degrees and decimal minutes, [32, 49, 49.08] is DMS. classify()
turns such an array into an explicit DegreesOnly/DegreesMinutes/DegreesMinutesSeconds
value; those may also be passed to the converters directly.
"""

__all__ = [
    'AngularValue', 'DEFAULT_PRECISION', 'DegreesMinutes', 'DegreesMinutesSeconds',
    'DegreesOnly', 'classify', 'convert_angle', 'to_decimal_degrees',
    'to_degrees_decimal_minutes', 'to_degrees_minutes_seconds',
]

import math
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from geodetic._const import (
    GEOSPATIAL_VALUE_LENGTH, MINUTES_PER_DEGREE, SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE, TEN_THOUSANDTHS,
)
from geodetic.formats import GeospatialFormat
from geodetic.utils.functions import fractional_part, is_real_number, round_half_up
from geodetic.utils.logging import log_rejected, warn_once

# Decimal places kept when splitting the fractional part off a component
DEFAULT_PRECISION = 10


class DegreesOnly(NamedTuple):
    """Decimal degrees"""
    degrees: float


class DegreesMinutes(NamedTuple):
    """Whole degrees and decimal minutes"""
    degrees: float
    minutes: float


class DegreesMinutesSeconds(NamedTuple):
    """Whole degrees, whole minutes and decimal seconds"""
    degrees: float
    minutes: float
    seconds: float


AngularValue = Union[DegreesOnly, DegreesMinutes, DegreesMinutesSeconds]

_VARIANTS = (DegreesOnly, DegreesMinutes, DegreesMinutesSeconds)


def _is_positional(value: Any) -> bool:
    """True for a list/tuple/1-d array holding exactly three slots"""
    if isinstance(value, np.ndarray):
        return value.ndim == 1 and len(value) == GEOSPATIAL_VALUE_LENGTH

    return isinstance(value, (list, tuple)) and len(value) == GEOSPATIAL_VALUE_LENGTH


def classify(value: Any) -> Optional[AngularValue]:
    """
    Determines which representation a positional [degrees, minutes, seconds]
    array is in, based on its trailing zero slots.

    Scanning from the seconds slot backwards, the first slot with a nonzero
    magnitude decides the dimension: a nonzero seconds slot is DMS, a nonzero
    minutes slot (with zero seconds) is degrees and decimal minutes, anything
    else is decimal degrees. An all-zero array is DegreesOnly(0).

    Values which are already one of the tagged types are returned unchanged.

    Args:
        value:
            A 3-element list, tuple or 1-d array of finite numbers, or an
            AngularValue

    Returns:
        The AngularValue, or None if the value is not a valid angle
    """
    if isinstance(value, _VARIANTS):
        return value if all(is_real_number(x) for x in value) else None

    if not _is_positional(value):
        return None

    slots = list(value)
    if not all(is_real_number(x) for x in slots):
        return None

    if abs(slots[2]) > 0:
        return DegreesMinutesSeconds(*slots)

    if abs(slots[1]) > 0:
        return DegreesMinutes(slots[0], slots[1])

    return DegreesOnly(slots[0])


def _pad(angle: AngularValue) -> Tuple[float, float, float]:
    """Expands an AngularValue to three slots"""
    return tuple(angle) + (0,) * (GEOSPATIAL_VALUE_LENGTH - len(angle))  # type: ignore


def _leading_sign(slots: Sequence[float], operation: str) -> int:
    """
    Returns the sign of the most significant nonzero slot. Negative signs on
    any later slot are ignored, with a warning. A negative-zero degrees slot
    ("-0 30 0") makes the whole angle negative.
    """
    sign = -1 if slots[0] == 0 and math.copysign(1, slots[0]) < 0 else 0
    leading = True
    for slot in slots:
        if slot == 0:
            continue

        if leading:
            leading = False
            sign = sign or (-1 if slot < 0 else 1)
        elif slot < 0:
            warn_once(
                f'{operation}: only the most significant nonzero component may carry a sign; '
                'negative signs on minutes/seconds are ignored. (this warning will not repeat)'
            )
            break

    return sign or 1


def _apply_sign(parts: List[float], sign: int) -> List[float]:
    """Places the sign on the most significant nonzero part"""
    if sign < 0:
        for idx, part in enumerate(parts):
            if part != 0:
                parts[idx] = -part
                break

    return parts


def to_degrees_minutes_seconds(value: Any, precision: int = DEFAULT_PRECISION) -> Optional[List[float]]:
    """
    Converts an angle to [degrees, minutes, seconds].

    Decimal degrees ([32.8303, 0, 0]) and degrees with decimal minutes
    ([32, 49.818, 0]) are both broken down into whole degrees, whole minutes and
    seconds, and seconds which round to 60 carry upwards. A DMS input
    ([32, 49, 49.08]) is passed through slot by slot: degrees and minutes are
    truncated and seconds rounded, with no carrying.

    Args:
        value:
            The angle, as a positional [degrees, minutes, seconds] array or an
            AngularValue

        precision: (int)
            (Default 10) Decimal places kept when splitting the fractional part off
            degrees or minutes. Should be at least the number of decimal places
            the input carries.

    Returns:
        [degrees (int), minutes (int), seconds (float, 4 decimal places)], with the
        sign on the most significant nonzero part; or None if the value is not
        a valid angle

    Example:
        to_degrees_minutes_seconds([32.8303, 0, 0])  # [32, 49, 49.08]
    """
    angle = classify(value)
    if angle is None:
        log_rejected('to_degrees_minutes_seconds', value, 'not a 3-slot numeric angle')
        return None

    slots = _pad(angle)
    sign = _leading_sign(slots, 'to_degrees_minutes_seconds')
    d, m, s = (abs(x) for x in slots)

    if isinstance(angle, DegreesMinutesSeconds):
        return _apply_sign(
            [math.trunc(d), math.trunc(m), round_half_up(s, TEN_THOUSANDTHS)],
            sign
        )

    degrees = math.trunc(d)
    minutes = fractional_part(d, precision) * MINUTES_PER_DEGREE + m
    seconds = round_half_up(fractional_part(minutes, precision) * SECONDS_PER_MINUTE, TEN_THOUSANDTHS)
    minutes = math.trunc(minutes)

    if seconds >= SECONDS_PER_MINUTE:
        seconds = 0.0
        minutes += 1

    if minutes >= MINUTES_PER_DEGREE:
        carry, minutes = divmod(minutes, MINUTES_PER_DEGREE)
        degrees += carry

    return _apply_sign([degrees, minutes, seconds], sign)


def to_degrees_decimal_minutes(value: Any, precision: int = DEFAULT_PRECISION) -> Optional[List[float]]:
    """
    Converts an angle to [degrees, decimal minutes, 0].

    Args:
        value:
            The angle, as a positional [degrees, minutes, seconds] array or an
            AngularValue

        precision: (int)
            (Default 10) Decimal places kept when splitting the fractional part off
            the degrees.

    Returns:
        [degrees (int), minutes (float, 4 decimal places), 0], with the sign on the
        most significant nonzero part; or None if the value is not a valid angle

    Example:
        to_degrees_decimal_minutes([32, 49, 49.08])  # [32, 49.818, 0]
    """
    angle = classify(value)
    if angle is None:
        log_rejected('to_degrees_decimal_minutes', value, 'not a 3-slot numeric angle')
        return None

    slots = _pad(angle)
    sign = _leading_sign(slots, 'to_degrees_decimal_minutes')
    d, m, s = (abs(x) for x in slots)

    degrees = math.trunc(d)
    minutes = round_half_up(
        fractional_part(d, precision) * MINUTES_PER_DEGREE + m + s / SECONDS_PER_MINUTE,
        TEN_THOUSANDTHS
    )
    if minutes >= MINUTES_PER_DEGREE:
        carry, minutes = divmod(minutes, MINUTES_PER_DEGREE)
        degrees += int(carry)
        minutes = round_half_up(minutes, TEN_THOUSANDTHS)

    return _apply_sign([degrees, minutes], sign) + [0]


def _parse_slots(value: Any) -> Optional[List[float]]:
    """Reads three numeric slots out of a string, sequence or AngularValue"""
    if isinstance(value, _VARIANTS):
        value = _pad(value)
    elif isinstance(value, str):
        value = value.split()
        if len(value) != GEOSPATIAL_VALUE_LENGTH:
            return None

    if not _is_positional(value):
        return None

    slots = []
    for slot in value:
        if isinstance(slot, str):
            try:
                slot = float(slot)
            except ValueError:
                return None
        elif not is_real_number(slot):
            return None

        slots.append(float(slot))

    return slots


def to_decimal_degrees(value: Any) -> Optional[float]:
    """
    Composes an angle into signed decimal degrees.

    The sign is taken from the most significant nonzero component (the degrees,
    unless they are zero); all components contribute their magnitude.

    Args:
        value:
            The angle, as a positional [degrees, minutes, seconds] array (of numbers
            or numeric strings), an AngularValue, or a string of three
            whitespace-delimited components, e.g. '-32 49 49.08'

    Returns:
        float, or None if the value cannot be read as an angle

    Example:
        to_decimal_degrees(['32', '49', '49.08'])  # 32.8303
    """
    slots = _parse_slots(value)
    if slots is None:
        log_rejected('to_decimal_degrees', value, 'not a 3-component angle')
        return None

    sign = _leading_sign(slots, 'to_decimal_degrees')
    d, m, s = (abs(x) for x in slots)
    dd = sign * (d + m / MINUTES_PER_DEGREE + s / SECONDS_PER_DEGREE)
    if not math.isfinite(dd):
        log_rejected('to_decimal_degrees', value, 'composed value is not finite')
        return None

    return dd


def convert_angle(
    value: Any,
    source: Union[GeospatialFormat, str],
    target: Union[GeospatialFormat, str],
    precision: int = DEFAULT_PRECISION,
):
    """
    Converts an angle from one representation to another.

    DECIMAL_DEGREES and RADIAN_DEGREES values are plain numbers;
    DEGREES_MINUTES_SECONDS and DEGREES_DECIMAL_MINUTES values are positional
    [degrees, minutes, seconds] arrays, AngularValues, or strings of three
    whitespace-delimited components ('32 49 49.08').

    Args:
        value:
            The angle, in the source representation

        source:
            The GeospatialFormat (or its string value) the angle is in

        target:
            The GeospatialFormat (or its string value) to convert to

        precision: (int)
            (Default 10) Passed through to the DMS/DDM converters

    Returns:
        The angle in the target representation, or None if the value is invalid
    """
    source, target = GeospatialFormat(source), GeospatialFormat(target)
    if GeospatialFormat.CARTESIAN in (source, target):
        raise ValueError('Cartesian is a position format; use to_cartesian/to_geodetic instead')

    if source in (GeospatialFormat.DEGREES_MINUTES_SECONDS, GeospatialFormat.DEGREES_DECIMAL_MINUTES):
        # Strings and numeric-string slots are read the same way for every target
        angle = value if isinstance(value, _VARIANTS) else _parse_slots(value)
        if angle is None:
            log_rejected('convert_angle', value, f'not a 3-component {source} value')
            return None
    elif not is_real_number(value):
        log_rejected('convert_angle', value, f'not a finite {source} value')
        return None
    elif source is GeospatialFormat.RADIAN_DEGREES:
        angle = [math.degrees(value), 0, 0]
    else:
        angle = [value, 0, 0]

    if target is GeospatialFormat.DEGREES_MINUTES_SECONDS:
        return to_degrees_minutes_seconds(angle, precision)

    if target is GeospatialFormat.DEGREES_DECIMAL_MINUTES:
        return to_degrees_decimal_minutes(angle, precision)

    dd = to_decimal_degrees(angle)
    if dd is None or target is GeospatialFormat.DECIMAL_DEGREES:
        return dd

    return math.radians(dd)

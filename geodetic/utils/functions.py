"""Module for numeric helpers shared by the transforms and angle converters"""

__all__ = ['fractional_part', 'is_real_number', 'round_half_up']

import math
import numbers
from typing import Any


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def fractional_part(value: float, precision: int) -> float:
    """
    Returns the fractional part of the magnitude of a value, rounded to a fixed
    number of decimal places.

    Subtracting the integer part of a float leaves representation noise behind
    (32.8303 - 32 == 0.8302999999999976); rounding to `precision` places removes it
    so that downstream multiplications by 60 land on the intended values.

    Args:
        value:
            The number to split

        precision:
            Decimal places to keep. Should be at least the number of decimal places
            carried by the source value.

    Returns:
        float in [0, 1]
    """
    value = abs(value)
    return round_half_up(value - math.trunc(value), precision)


def is_real_number(value: Any) -> bool:
    """True for finite ints/floats (including numpy scalars); False for bools"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False

    return math.isfinite(value)

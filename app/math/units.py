# app/math/units.py

import math

# Share weights: a son takes the portion of two daughters (QS 4:11)
SON_UNITS = 2
DAUGHTER_UNITS = 1


def _as_float(count: int) -> float:
    # counts beyond the float range behave like infinity
    try:
        return float(count)
    except OverflowError:
        return math.inf


def total_share_units(sons: int, daughters: int) -> float:
    """
    Total share units for a group of children.
    Each son weighs SON_UNITS, each daughter DAUGHTER_UNITS.
    """
    return _as_float(sons) * SON_UNITS + _as_float(daughters) * DAUGHTER_UNITS


def unit_value(amount: float, total_units: float) -> float:
    """Monetary value of one share unit (0.0 once the units are infinite)."""
    return amount / total_units

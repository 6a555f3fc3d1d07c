"""
capship Rounding Primitives

Exact tonnage rounding to whole or half-ton granularity.

Floating point products such as ``100000 * 0.0025`` carry representation
noise (250.00000000000003) that would push a plain ``math.ceil`` up a full
step. Values are normalised to a fixed precision and rounded with
``decimal`` so every call site gets conventional, reproducible results.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP

from .enums import Granularity, RoundingMode

# Decimal places kept before rounding
WEIGHT_PRECISION = 6

_DECIMAL_MODES = {
    RoundingMode.NEAREST: ROUND_HALF_UP,
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
}


def round_weight(
    value: float,
    granularity: Granularity = Granularity.HALF_TON,
    mode: RoundingMode = RoundingMode.NEAREST,
) -> float:
    """
    Round a tonnage to the given granularity.

    Args:
        value: Raw tonnage
        granularity: Whole ton or half ton
        mode: Nearest (half-up), ceiling or floor

    Returns:
        Rounded tonnage as float

    Idempotent: rounding an already rounded value returns it unchanged.
    """
    step = Decimal(str(granularity.value))
    normalised = Decimal(repr(round(float(value), WEIGHT_PRECISION)))
    steps = (normalised / step).quantize(Decimal(1), rounding=_DECIMAL_MODES[mode])
    return float(steps * step)


def ceil_weight(value: float, granularity: Granularity = Granularity.HALF_TON) -> float:
    """Round up to the granularity."""
    return round_weight(value, granularity, RoundingMode.CEILING)


def floor_weight(value: float, granularity: Granularity = Granularity.HALF_TON) -> float:
    """Round down to the granularity."""
    return round_weight(value, granularity, RoundingMode.FLOOR)


def ceil_int(value: float) -> int:
    """Whole-number ceiling, immune to representation noise."""
    return int(round_weight(value, Granularity.TON, RoundingMode.CEILING))


def floor_int(value: float) -> int:
    """Whole-number floor, immune to representation noise."""
    return int(round_weight(value, Granularity.TON, RoundingMode.FLOOR))


def round_int(value: float) -> int:
    """Whole-number half-up rounding."""
    return int(round_weight(value, Granularity.TON, RoundingMode.NEAREST))

"""
Coordinate quantization onto a 22-bit integer grid.
"""
import math
from typing import Literal

from .errors import BitWidthViolation, InvalidInput

BITS_PER_COORD = 22
MAX_COORD = (1 << BITS_PER_COORD) - 1  # 4194303

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0

LAT_STEP = (LAT_MAX - LAT_MIN) / MAX_COORD
LON_STEP = (LON_MAX - LON_MIN) / MAX_COORD

Rounding = Literal["nearest", "floor", "ceil"]
ROUNDING_MODES = ("nearest", "floor", "ceil")


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a finite value into [low, high]."""
    if not math.isfinite(value):
        raise InvalidInput(f"Invalid number: {value!r}")
    return min(high, max(low, value))


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding, so ties are resolved here
    explicitly. value - floor(value) is exact for floats.
    """
    whole = math.floor(abs(value))
    if abs(value) - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value)) if whole else 0


def apply_rounding(value: float, rounding: Rounding) -> int:
    if rounding == "nearest":
        return round_half_away_from_zero(value)
    if rounding == "floor":
        return math.floor(value)
    if rounding == "ceil":
        return math.ceil(value)
    raise InvalidInput(f"Unknown rounding mode: {rounding!r}")


def forward(value: float, low: float, high: float, rounding: Rounding = "nearest") -> int:
    """
    Map a value on [low, high] to a grid index.

    Args:
        value: Coordinate value, clamped into [low, high]
        low: Lower bound of the axis
        high: Upper bound of the axis
        rounding: One of 'nearest', 'floor', 'ceil'

    Returns:
        Grid index in [0, 2^22 - 1]

    Raises:
        InvalidInput: If value is NaN or infinite, or rounding is unknown
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid number: {value!r}")
    clamped = clamp(value, low, high)
    step = (high - low) / MAX_COORD
    grid = apply_rounding((clamped - low) / step, rounding)
    return int(min(MAX_COORD, max(0, grid)))


def inverse(grid_value: int, low: float, step: float, center: bool = True) -> float:
    """
    Map a grid index back to a coordinate value.

    Args:
        grid_value: Grid index in [0, 2^22 - 1]
        low: Lower bound of the axis
        step: Cell size of the axis
        center: Return the cell midpoint instead of its lower bound

    Returns:
        Coordinate value
    """
    if not 0 <= grid_value <= MAX_COORD:
        raise BitWidthViolation("grid_value", grid_value, BITS_PER_COORD)
    return low + (grid_value + 0.5 if center else grid_value) * step


def quantize_lat(lat: float, rounding: Rounding = "nearest") -> int:
    return forward(lat, LAT_MIN, LAT_MAX, rounding)


def quantize_lon(lon: float, rounding: Rounding = "nearest") -> int:
    return forward(lon, LON_MIN, LON_MAX, rounding)


def dequantize_lat(y: int, center: bool = True) -> float:
    return inverse(y, LAT_MIN, LAT_STEP, center)


def dequantize_lon(x: int, center: bool = True) -> float:
    return inverse(x, LON_MIN, LON_STEP, center)

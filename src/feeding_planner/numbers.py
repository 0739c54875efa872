"""Numeric helpers shared by the planner services."""

import math
import sys

MAX_PERCENTAGE = sys.float_info.max


def to_amount(value: object) -> float:
    """Parse a value into a finite, non-negative float, defaulting to 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half up; inf and nan become 0."""
    if not math.isfinite(value):
        return 0.0
    factor = 10**digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def percentage(current: float, target: float) -> float:
    """Return current / target * 100 (0 without a target, capped when huge)."""
    if target <= 0:
        return 0.0
    result = current / target * 100
    if not math.isfinite(result):
        return MAX_PERCENTAGE
    return result

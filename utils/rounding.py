# utils/rounding.py
import math
import sys

EPSILON = sys.float_info.epsilon


def round_half_up(x: float) -> int:
    """Nearest integer, halves always rounding toward +inf."""
    return int(math.floor(x + 0.5))


def round_money(x: float) -> float:
    """Round to 2 decimals, half-up, nudged by epsilon against float representation error."""
    return math.floor((x + EPSILON) * 100 + 0.5) / 100


def round_to_step(x: float, step: float = 2.5) -> float:
    """Snap a weight to the nearest loadable multiple of `step`."""
    return round_half_up(x / step) * step

"""Small numeric helpers used by the steering controller."""

import math

__all__ = [
    "normalize_angle",
    "get_distance",
    "normalize_for_vehicle",
    "round_to_tens",
]


def normalize_angle(angle: float) -> float:
    """Bring an angle back by one full turn if it lies outside [-pi, pi]."""
    if angle > math.pi:
        angle -= 2 * math.pi
    if angle < -math.pi:
        angle += 2 * math.pi
    return angle


def get_distance(a1: float, a2: float, b1: float, b2: float) -> float:
    """Euclidean distance between the points (a1, a2) and (b1, b2)."""
    return math.hypot(a1 - b1, a2 - b2)


def normalize_for_vehicle(
    value: float,
    min_current: float,
    max_current: float,
    min_target: float,
    max_target: float,
) -> float:
    """Map ``value`` linearly from one range onto another.

    ``min_current`` maps to ``min_target`` and ``max_current`` to ``max_target``.
    Raises ZeroDivisionError when the current range is empty.
    """
    ratio = (value - min_current) / (max_current - min_current)
    return ratio * (max_target - min_target) + min_target


def round_to_tens(number: float) -> float:
    """Truncate a number toward zero to a multiple of ten."""
    return float(int(number / 10) * 10)
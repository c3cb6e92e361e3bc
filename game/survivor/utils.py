"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import Tuple

# Distances below this are treated as coincident points
MIN_DISTANCE = 1e-6


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def direction(x1: float, y1: float, x2: float, y2: float,
              eps: float = MIN_DISTANCE) -> Tuple[float, float]:
    """Unit vector pointing from (x1, y1) to (x2, y2).

    Returns (0, 0) when the points coincide.
    """
    dx = x2 - x1
    dy = y2 - y1
    l = math.hypot(dx, dy)
    if l < eps:
        return 0.0, 0.0
    return dx / l, dy / l


def circles_overlap(x1, y1, r1, x2, y2, r2) -> bool:
    """Strict overlap test: touching circles do not overlap"""
    return distance(x1, y1, x2, y2) < r1 + r2


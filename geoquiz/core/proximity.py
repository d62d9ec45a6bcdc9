"""Distance checks for point-based locations such as cities."""

from __future__ import annotations

import math

from geoquiz.core.models import Point

# Same units as the catalog coordinates.
DEFAULT_TOLERANCE = 30.0


def calculate_distance(point1: Point, point2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(point1.x - point2.x, point1.y - point2.y)


def is_near(click: Point, target: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether a click landed strictly within ``tolerance`` of a target."""
    return calculate_distance(click, target) < tolerance

"""
Geometry utilities

General-purpose point and angle helpers used across SatLayout modules.
"""

from __future__ import annotations
import math

from .layout.types import Point2D
from .types import Size


def distance(point1: Point2D, point2: Point2D) -> float:
    """Euclidean distance between two points"""
    dx = point1.x - point2.x
    dy = point1.y - point2.y
    return math.sqrt(dx * dx + dy * dy)


def angle_between(point1: Point2D, point2: Point2D) -> float:
    """
    Angle of the vector from point1 to point2

    Measured in screen coordinates, so positive angles turn clockwise
    on screen.

    Returns:
        Angle in radians in (-pi, pi]
    """
    return math.atan2(point2.y - point1.y, point2.x - point1.x)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def round_to_two_digits(size: Size) -> Size:
    """
    Round a (width, height) size up to two decimal places

    Args:
        size: (width, height) tuple

    Returns:
        (width, height) with each component ceiled to 0.01
    """
    width, height = size
    return (math.ceil(width * 100) / 100, math.ceil(height * 100) / 100)

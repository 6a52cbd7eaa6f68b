"""
Layout Calculator for SatLayout
Pure functions placing satellite buttons around a center button

Two arrangements are supported:
- Straight: satellites stepped along one axis away from the center
- Arc: satellites spread by index between a start and an end angle

Neither function validates its input or raises on degenerate values.
Zero counts, zero steps, equal angles and negative radii all resolve to
well-defined (possibly coincident) positions.
"""
from __future__ import annotations
from typing import Dict, List, Tuple
import numpy as np

from .types import (
    Point2D,
    Direction,
    ArcWinding,
    StraightLayoutSpec,
    ArcLayoutSpec,
    LayoutSpec,
)

# Unit offsets in screen coordinates (y grows downward)
_DIRECTION_VECTORS: Dict[Direction, Tuple[float, float]] = {
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
    Direction.TOP: (0.0, -1.0),
    Direction.BOTTOM: (0.0, 1.0),
}


def compute_straight_layout(spec: StraightLayoutSpec) -> List[Point2D]:
    """
    Calculate positions for straight line layout

    Each satellite sits one step further from the center than the previous
    one, where step = (primary_size + satellite_size) / 2 + spacing.

    Args:
        spec: Straight layout specification

    Returns:
        List of `count` positions, nearest to the center first
    """
    dx, dy = _DIRECTION_VECTORS[Direction(spec.direction)]
    step = spec.step

    positions: List[Point2D] = []
    x, y = spec.center.x, spec.center.y
    for _ in range(spec.count):
        x += dx * step
        y += dy * step
        positions.append(Point2D(x, y))

    return positions


def compute_arc_layout(spec: ArcLayoutSpec) -> List[Point2D]:
    """
    Calculate positions for circle arc layout

    Satellite i sits at angle start + sign * (end - start) / (count - 1) * i
    on a circle of the given radius, where sign is +1 for clockwise winding
    and -1 for counterclockwise.

    Args:
        spec: Arc layout specification

    Returns:
        List of `count` positions, starting at the start angle
    """
    if spec.count <= 0:
        return []

    sign = 1.0 if ArcWinding(spec.winding) == ArcWinding.CLOCKWISE else -1.0

    # A single satellite has no interval to divide; it sits at the start angle
    if spec.count == 1:
        angles = np.array([spec.start_angle_rad], dtype=np.float64)
    else:
        increment = spec.angular_span / (spec.count - 1)
        angles = spec.start_angle_rad + sign * increment * np.arange(spec.count, dtype=np.float64)

    xs = spec.center.x + spec.radius * np.cos(angles)
    ys = spec.center.y + spec.radius * np.sin(angles)

    return [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]


def compute_layout(spec: LayoutSpec) -> List[Point2D]:
    """
    Dispatch to the calculator matching the spec type

    Args:
        spec: StraightLayoutSpec or ArcLayoutSpec

    Returns:
        List of satellite positions

    Raises:
        TypeError: If spec is neither a straight nor an arc spec
    """
    if isinstance(spec, StraightLayoutSpec):
        return compute_straight_layout(spec)
    if isinstance(spec, ArcLayoutSpec):
        return compute_arc_layout(spec)
    raise TypeError(f"Unsupported layout spec: {type(spec).__name__}")

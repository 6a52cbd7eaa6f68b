"""
Layout types for SatLayout
Value objects consumed and produced by the layout calculator

All types are immutable (frozen) for safety and testability.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union, Literal
import pandas as pd


@dataclass(frozen=True)
class Point2D:
    """
    Position in screen coordinates (origin top-left, y grows downward)

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """
    x: float
    y: float

    @classmethod
    def origin(cls) -> 'Point2D':
        """Point at (0, 0)"""
        return cls(0.0, 0.0)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Direction(str, Enum):
    """Axis and sign along which straight-line items are placed"""
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'


class ArcWinding(str, Enum):
    """Sense in which angular increments are applied for arc layout"""
    CLOCKWISE = 'clockwise'
    COUNTER_CLOCKWISE = 'counterclockwise'


@dataclass(frozen=True)
class StraightLayoutSpec:
    """
    Placement of satellites along a single axis

    Attributes:
        direction: Axis and sign of placement
        spacing: Gap between adjacent button edges (px)
        primary_size: Diameter of the center button (px)
        satellite_size: Diameter of each satellite button (px)
        count: Number of satellites
        center: Position of the center button
    """
    direction: Direction
    spacing: float
    primary_size: float
    satellite_size: float
    count: int
    center: Point2D

    @property
    def step(self) -> float:
        """Distance between consecutive positions (px)"""
        return (self.primary_size + self.satellite_size) / 2 + self.spacing


@dataclass(frozen=True)
class ArcLayoutSpec:
    """
    Placement of satellites on a circle arc

    Attributes:
        start_angle_rad: Angle of the first satellite (radians)
        end_angle_rad: Angle of the last satellite before winding (radians)
        radius: Distance from center to each satellite (px)
        count: Number of satellites
        center: Position of the center button
        winding: Direction in which angles are enumerated
    """
    start_angle_rad: float
    end_angle_rad: float
    radius: float
    count: int
    center: Point2D
    winding: ArcWinding = ArcWinding.CLOCKWISE

    @property
    def angular_span(self) -> float:
        """Signed sweep from start to end angle (radians)"""
        return self.end_angle_rad - self.start_angle_rad


LayoutSpec = Union[StraightLayoutSpec, ArcLayoutSpec]
"""Any spec accepted by the calculator"""

LayoutMode = Literal['straight', 'arc']
"""Arrangement mode of a menu"""


@dataclass(frozen=True)
class LayoutRequest:
    """
    Named layout spec, one row of a batch file

    Attributes:
        name: Identifier used in outputs
        spec: Placement specification
    """
    name: str
    spec: LayoutSpec

    @property
    def mode(self) -> LayoutMode:
        return 'arc' if isinstance(self.spec, ArcLayoutSpec) else 'straight'


@dataclass(frozen=True)
class LayoutResult:
    """
    Computed positions for one layout

    This is the output of LayoutEngine and input to the writers and MenuPlotter.

    Attributes:
        name: Layout identifier
        mode: 'straight' or 'arc'
        spec: Spec the positions were computed from
        positions: Satellite positions in placement order
    """
    name: str
    mode: LayoutMode
    spec: LayoutSpec
    positions: Tuple[Point2D, ...]

    @property
    def count(self) -> int:
        """Number of satellites"""
        return len(self.positions)

    @property
    def center(self) -> Point2D:
        return self.spec.center

    def bounds(self, padding: float = 0.0) -> Tuple[float, float, float, float]:
        """
        Bounding box of center and satellites

        Args:
            padding: Margin added on every side (px)

        Returns:
            (min_x, min_y, max_x, max_y)
        """
        xs = [self.center.x] + [p.x for p in self.positions]
        ys = [self.center.y] + [p.y for p in self.positions]
        return (min(xs) - padding, min(ys) - padding,
                max(xs) + padding, max(ys) + padding)

    def to_dataframe(self) -> pd.DataFrame:
        """Positions as a DataFrame with 'index', 'x', 'y' columns"""
        return pd.DataFrame({
            'index': list(range(self.count)),
            'x': [p.x for p in self.positions],
            'y': [p.y for p in self.positions],
        })

"""
Layout Module for SatLayout
Satellite button placement around a primary button

Public API:
    - compute_straight_layout: Satellites stepped along one axis
    - compute_arc_layout: Satellites spread over a circle arc
    - compute_layout: Dispatch on spec type
    - LayoutEngine: Configuration-driven layout calculation
    - LayoutResult: Computed positions for one layout
"""

from .calculator import compute_straight_layout, compute_arc_layout, compute_layout
from .engine import LayoutEngine
from .types import (
    Point2D,
    Direction,
    ArcWinding,
    StraightLayoutSpec,
    ArcLayoutSpec,
    LayoutSpec,
    LayoutRequest,
    LayoutResult,
)

__all__ = [
    'compute_straight_layout',
    'compute_arc_layout',
    'compute_layout',
    'LayoutEngine',
    'Point2D',
    'Direction',
    'ArcWinding',
    'StraightLayoutSpec',
    'ArcLayoutSpec',
    'LayoutSpec',
    'LayoutRequest',
    'LayoutResult',
]

"""SatLayout: Satellite button placement for floating menus"""

from .config import MenuConfig, ButtonConfig, LayoutConfig, PlotConfig
from .layout import (
    LayoutEngine,
    compute_straight_layout,
    compute_arc_layout,
    compute_layout,
    Point2D,
    Direction,
    ArcWinding,
    StraightLayoutSpec,
    ArcLayoutSpec,
    LayoutRequest,
    LayoutResult,
)
from . import geometry
from .visualizer import MenuPlotter

__version__ = "0.1.0"
__all__ = [
    "MenuConfig", "ButtonConfig", "LayoutConfig", "PlotConfig",
    "LayoutEngine", "compute_straight_layout", "compute_arc_layout", "compute_layout",
    "Point2D", "Direction", "ArcWinding", "StraightLayoutSpec", "ArcLayoutSpec",
    "LayoutRequest", "LayoutResult", "geometry", "MenuPlotter"]

"""
Layout Engine for SatLayout
Turns a menu configuration or a batch of requests into layout results

The engine owns no geometry of its own: it builds immutable specs from
MenuConfig, hands them to the pure functions in `calculator` and wraps the
returned positions in LayoutResult objects.
"""
from __future__ import annotations
from typing import Iterable, List, Optional
import logging

from ..config import MenuConfig
from ..geometry import degrees_to_radians
from .calculator import compute_layout
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

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Configuration-driven layout engine

    Algorithm:
    1. Read mode, sizes and arrangement parameters from MenuConfig
    2. Build a StraightLayoutSpec or ArcLayoutSpec (angles in radians)
    3. Compute positions with the matching calculator function
    """

    def __init__(self, config: Optional[MenuConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Menu configuration. If None, uses default settings.
        """
        self.config = config or MenuConfig()
        self.layout_config = self.config.layout
        self.button_config = self.config.buttons

        logger.debug(f"LayoutEngine initialized ({self.layout_config.mode} mode)")

    def build_spec(self, count: int, center: Point2D) -> LayoutSpec:
        """
        Build a layout spec from the configuration

        Args:
            count: Number of satellites
            center: Position of the primary button

        Returns:
            StraightLayoutSpec or ArcLayoutSpec

        Raises:
            ValueError: If the configured mode, direction or winding is unknown
        """
        mode = self.layout_config.mode
        if mode == 'straight':
            return StraightLayoutSpec(
                direction=Direction(self.layout_config.direction),
                spacing=self.layout_config.spacing,
                primary_size=self.button_config.primary_size,
                satellite_size=self.button_config.satellite_size,
                count=count,
                center=center,
            )
        if mode == 'arc':
            return ArcLayoutSpec(
                start_angle_rad=degrees_to_radians(self.layout_config.start_angle),
                end_angle_rad=degrees_to_radians(self.layout_config.end_angle),
                radius=self.layout_config.radius,
                count=count,
                center=center,
                winding=ArcWinding(self.layout_config.winding),
            )
        raise ValueError(f"Unknown layout mode '{mode}' (expected 'straight' or 'arc')")

    def calculate_layout(
        self,
        count: int,
        center: Optional[Point2D] = None,
        name: str = 'menu'
    ) -> LayoutResult:
        """
        Calculate satellite positions for the configured menu

        Args:
            count: Number of satellites
            center: Position of the primary button (default: origin)
            name: Identifier carried into the result

        Returns:
            LayoutResult with all positions calculated
        """
        spec = self.build_spec(count, center or Point2D.origin())
        return self.layout(LayoutRequest(name=name, spec=spec))

    def layout(self, request: LayoutRequest) -> LayoutResult:
        """
        Compute positions for a single request

        Args:
            request: Named layout spec

        Returns:
            LayoutResult for the request
        """
        positions = compute_layout(request.spec)

        logger.info(f"Layout '{request.name}': {len(positions)} satellites, {request.mode} mode, "
                    f"center ({request.spec.center.x:.1f}, {request.spec.center.y:.1f})")
        for i, point in enumerate(positions):
            logger.debug(f"  [{i}] ({point.x:.2f}, {point.y:.2f})")

        return LayoutResult(
            name=request.name,
            mode=request.mode,
            spec=request.spec,
            positions=tuple(positions),
        )

    def run_requests(self, requests: Iterable[LayoutRequest]) -> List[LayoutResult]:
        """
        Compute positions for a batch of requests

        Args:
            requests: Named layout specs, e.g. from LayoutRequestReader

        Returns:
            One LayoutResult per request, in input order
        """
        results = [self.layout(request) for request in requests]
        logger.info(f"Computed {len(results)} layouts "
                    f"({sum(r.count for r in results)} satellites total)")
        return results

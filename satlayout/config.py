"""
SatLayout Configuration
Floating menu geometry, arrangement and preview settings
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class ButtonConfig:
    """
    Button sizing and styling

    Sizes are diameters of round buttons.
    """

    primary_size: float = 50.0
    """Diameter of the center (primary) button (px)"""

    satellite_size: float = 40.0
    """Diameter of each satellite (submenu) button (px)"""

    primary_color: str = '#007AFF'
    """Fill color of the primary button"""

    satellite_color: str = '#8E8E93'
    """Fill color of satellite buttons"""

    tint_color: str = '#FFFFFF'
    """Label color drawn on top of buttons"""

    shadow_alpha: float = 0.3
    """Transparency of the drop shadow under each button"""

    shadow_offset: Tuple[float, float] = (0.0, 2.0)
    """Drop shadow offset (px, screen coordinates)"""


@dataclass
class LayoutConfig:
    """
    Arrangement of satellites around the primary button

    Straight mode uses `direction` and `spacing`.
    Arc mode uses the angles, `radius` and `winding`.
    """

    # ============================================================
    # MODE
    # ============================================================
    mode: str = 'straight'
    """Arrangement mode: 'straight' or 'arc'"""

    # ============================================================
    # STRAIGHT LAYOUT
    # ============================================================
    direction: str = 'top'
    """Direction satellites extend in: 'left', 'right', 'top' or 'bottom'"""

    spacing: float = 10.0
    """Gap between adjacent button edges (px)"""

    # ============================================================
    # ARC LAYOUT
    # ============================================================
    start_angle: float = 180.0
    """Angle of the first satellite (degrees, 0 = +x, 90 = down on screen)"""

    end_angle: float = 270.0
    """Angle of the last satellite (degrees)"""

    radius: float = 100.0
    """Distance from the primary button center to each satellite (px)"""

    winding: str = 'clockwise'
    """Angle enumeration direction: 'clockwise' or 'counterclockwise'"""


@dataclass
class PlotConfig:
    """
    Static preview rendering parameters
    """

    figure_size: float = 6.0
    """Figure size in inches (square plot)"""

    dpi: int = 150
    """DPI for saved figures"""

    margin: float = 20.0
    """Extra space around the outermost button (px)"""

    label_fontsize: int = 9
    """Font size for satellite index labels"""

    title_fontsize: int = 12
    """Font size for the title"""

    connector_linewidth: float = 0.8
    """Line width for center-to-satellite connectors"""

    connector_alpha: float = 0.35
    """Transparency for connectors"""

    show_connectors: bool = True
    """Draw connectors from the primary button to each satellite"""


@dataclass
class MenuConfig:
    """
    Complete floating menu configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    buttons: ButtonConfig = field(default_factory=ButtonConfig)
    """Button sizing and styling"""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Satellite arrangement"""

    plot: PlotConfig = field(default_factory=PlotConfig)
    """Preview rendering"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def vertical(cls) -> 'MenuConfig':
        """
        Satellites stacked above the primary button

        Example:
            >>> config = MenuConfig.vertical()
            >>> engine = LayoutEngine(config)
        """
        config = cls()
        config.layout.mode = 'straight'
        config.layout.direction = 'top'
        return config

    @classmethod
    def horizontal(cls) -> 'MenuConfig':
        """
        Satellites in a row to the left of the primary button

        Suited to a primary button pinned to the right screen edge.
        """
        config = cls()
        config.layout.mode = 'straight'
        config.layout.direction = 'left'
        return config

    @classmethod
    def quarter_circle(cls) -> 'MenuConfig':
        """
        Satellites on a quarter arc from left to top

        Suited to a primary button in the bottom-right corner.

        Example:
            >>> config = MenuConfig.quarter_circle()
            >>> engine = LayoutEngine(config)
        """
        config = cls()
        config.layout.mode = 'arc'
        config.layout.start_angle = 180.0
        config.layout.end_angle = 270.0
        config.layout.radius = 100.0
        return config

    @classmethod
    def half_circle(cls) -> 'MenuConfig':
        """
        Satellites on the upper half circle, left to right

        Suited to a primary button centered on the bottom edge.
        """
        config = cls()
        config.layout.mode = 'arc'
        config.layout.start_angle = 180.0
        config.layout.end_angle = 360.0
        config.layout.radius = 110.0
        return config

    @classmethod
    def presets(cls) -> Tuple[str, ...]:
        """Names accepted by `from_preset`"""
        return ('vertical', 'horizontal', 'quarter_circle', 'half_circle')

    @classmethod
    def from_preset(cls, name: str) -> 'MenuConfig':
        """
        Build a preset configuration by name

        Raises:
            ValueError: If name is not a known preset
        """
        if name not in cls.presets():
            raise ValueError(f"Unknown preset '{name}'. Choose from: {', '.join(cls.presets())}")
        return getattr(cls, name)()

"""
Menu visualizer

Renders a computed layout as a static preview: the primary button at the
center, each satellite at its computed position, in screen coordinates.
"""

from __future__ import annotations
from typing import Optional, Tuple
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure
import logging

from .config import MenuConfig
from .layout.types import LayoutResult, StraightLayoutSpec

logger = logging.getLogger(__name__)


class MenuPlotter:
    """
    Creates preview images of floating menu layouts
    """

    def __init__(self, config: Optional[MenuConfig] = None) -> None:
        """
        Initialize MenuPlotter

        Args:
            config: Menu configuration for sizes and styling. If None, uses default settings.

        Example:
            >>> plotter = MenuPlotter()
            >>> plotter = MenuPlotter(MenuConfig.quarter_circle())
        """
        self.config: MenuConfig = config or MenuConfig()

    def _button_sizes(self, result: LayoutResult) -> Tuple[float, float]:
        """Primary and satellite diameters, taken from the spec when it carries them"""
        if isinstance(result.spec, StraightLayoutSpec):
            return result.spec.primary_size, result.spec.satellite_size
        return self.config.buttons.primary_size, self.config.buttons.satellite_size

    def _draw_button(self, ax, x: float, y: float, diameter: float, color: str, label: str) -> None:
        buttons = self.config.buttons
        radius = diameter / 2
        dx, dy = buttons.shadow_offset

        ax.add_patch(patches.Circle((x + dx, y + dy), radius, facecolor='black',
                                    edgecolor='none', alpha=buttons.shadow_alpha, zorder=2))
        ax.add_patch(patches.Circle((x, y), radius, facecolor=color,
                                    edgecolor='none', zorder=3))
        if label:
            ax.text(x, y, label, ha='center', va='center', color=buttons.tint_color,
                    fontsize=self.config.plot.label_fontsize, zorder=4)

    def plot(
        self,
        result: LayoutResult,
        output_file: Optional[str] = None,
        figsize: Optional[Tuple[float, float]] = None,
        show: bool = False
    ) -> Figure:
        """
        Draw a layout

        Args:
            result: Layout to draw
            output_file: Path to save the image. If None, the figure is only returned.
            figsize: Figure size in inches (default: square, from config)
            show: Display the figure interactively after drawing

        Returns:
            matplotlib Figure
        """
        plot_cfg = self.config.plot
        primary_size, satellite_size = self._button_sizes(result)

        if figsize is None:
            figsize = (plot_cfg.figure_size, plot_cfg.figure_size)
        fig, ax = plt.subplots(figsize=figsize)

        center = result.center
        if plot_cfg.show_connectors:
            for point in result.positions:
                ax.plot([center.x, point.x], [center.y, point.y], color='gray',
                        linewidth=plot_cfg.connector_linewidth, alpha=plot_cfg.connector_alpha,
                        linestyle='--', zorder=1)

        for i, point in enumerate(result.positions):
            self._draw_button(ax, point.x, point.y, satellite_size,
                              self.config.buttons.satellite_color, str(i + 1))
        self._draw_button(ax, center.x, center.y, primary_size,
                          self.config.buttons.primary_color, '')

        padding = max(primary_size, satellite_size) / 2 + plot_cfg.margin
        min_x, min_y, max_x, max_y = result.bounds(padding)
        ax.set_xlim(min_x, max_x)
        # Screen coordinates: y grows downward
        ax.set_ylim(max_y, min_y)
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.2)
        ax.set_title(f"{result.name} ({result.mode}, {result.count} satellites)",
                     fontsize=plot_cfg.title_fontsize)

        if output_file:
            fig.savefig(output_file, dpi=plot_cfg.dpi, bbox_inches='tight')
            logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig

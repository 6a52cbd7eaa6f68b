"""Plot subcommand - layout preview image"""

from __future__ import annotations
from typing import Optional, Tuple
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import matplotlib.pyplot as plt

from ..visualizer import MenuPlotter
from ..layout import LayoutEngine, Point2D
from .compute import add_layout_arguments, config_from_args, configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Render a preview image of one menu layout'
    )

    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')
    parser.add_argument('--name', default='menu',
                        help='Layout name shown in the title (default: menu)')
    parser.add_argument('--figsize', nargs=2, type=float, metavar=('WIDTH', 'HEIGHT'),
                        help='Figure size in inches (default: plot figure_size from the configuration)')

    add_layout_arguments(parser)

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_file = output_dir / f"{args.prefix}.satlayout.png"

    config = config_from_args(args)
    logger.info(f"Mode: {config.layout.mode}, satellites: {args.count}")
    logger.info(f"Output: {plot_file}")

    result = LayoutEngine(config).calculate_layout(args.count, Point2D(*args.center), name=args.name)

    figsize: Optional[Tuple[float, float]] = tuple(args.figsize) if args.figsize else None  # type: ignore
    plotter = MenuPlotter(config)
    fig = plotter.plot(result, output_file=str(plot_file), figsize=figsize)
    plt.close(fig)

    logger.info(f"✓ Plot saved: {plot_file}")

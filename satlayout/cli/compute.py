"""Compute subcommand - single layout from command-line options"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import MenuConfig
from ..layout import LayoutEngine, Point2D
from ..io import write_positions, write_summary

logger = logging.getLogger(__name__)


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Add options describing one menu layout

    Unset options keep the value of the chosen preset (or the defaults).

    Args:
        parser: Subcommand parser to extend
    """
    parser.add_argument('-n', '--count', type=int, required=True,
                        help='Number of satellite buttons')
    parser.add_argument('--center', nargs=2, type=float, default=[0.0, 0.0], metavar=('X', 'Y'),
                        help='Primary button center (default: 0 0)')
    parser.add_argument('--preset', choices=MenuConfig.presets(),
                        help='Start from a preset configuration')
    parser.add_argument('--mode', choices=['straight', 'arc'],
                        help='Arrangement mode (default: straight)')

    # Straight layout
    parser.add_argument('--direction', choices=['left', 'right', 'top', 'bottom'],
                        help='Straight layout direction (default: top)')
    parser.add_argument('--spacing', type=float,
                        help='Gap between button edges in px (default: 10)')
    parser.add_argument('--primary-size', type=float,
                        help='Primary button diameter in px (default: 50)')
    parser.add_argument('--satellite-size', type=float,
                        help='Satellite button diameter in px (default: 40)')

    # Arc layout
    parser.add_argument('--start-angle', type=float,
                        help='Arc start angle in degrees (default: 180)')
    parser.add_argument('--end-angle', type=float,
                        help='Arc end angle in degrees (default: 270)')
    parser.add_argument('--radius', type=float,
                        help='Arc radius in px (default: 100)')
    parser.add_argument('--winding', choices=['clockwise', 'counterclockwise'],
                        help='Arc winding (default: clockwise)')


def config_from_args(args: Namespace) -> MenuConfig:
    """
    Build a MenuConfig from parsed layout options

    Args:
        args: Parsed command-line arguments

    Returns:
        Preset (or default) configuration with explicit options applied
    """
    config = MenuConfig.from_preset(args.preset) if args.preset else MenuConfig()

    overrides = {
        'mode': args.mode,
        'direction': args.direction,
        'spacing': args.spacing,
        'start_angle': args.start_angle,
        'end_angle': args.end_angle,
        'radius': args.radius,
        'winding': args.winding,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config.layout, key, value)

    if args.primary_size is not None:
        config.buttons.primary_size = args.primary_size
    if args.satellite_size is not None:
        config.buttons.satellite_size = args.satellite_size

    return config


def configure_logging(args: Namespace) -> None:
    """Configure logging for a subcommand (DEBUG with --debug, INFO otherwise)"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add compute subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for compute subcommand
    """
    parser = subparsers.add_parser(
        'compute',
        help='Compute satellite positions for one menu'
    )

    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')
    parser.add_argument('--name', default='menu',
                        help='Layout name written to outputs (default: menu)')

    add_layout_arguments(parser)

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute compute subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)
    logger.info("=== SatLayout: Compute ===")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    positions_tsv = output_dir / f"{args.prefix}.satlayout_positions.tsv"
    summary_txt = output_dir / f"{args.prefix}.satlayout_summary.txt"

    config = config_from_args(args)
    engine = LayoutEngine(config)
    result = engine.calculate_layout(args.count, Point2D(*args.center), name=args.name)

    write_positions([result], str(positions_tsv))
    write_summary([result], str(summary_txt))

    logger.info(f"Positions TSV: {positions_tsv}")
    logger.info(f"Summary: {summary_txt}")

"""Batch subcommand - layouts for every row of a request file"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..layout import LayoutEngine
from ..io import read_requests, write_positions, write_summary
from ..data import DEFAULT_REQUESTS
from .compute import configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add batch subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for batch subcommand
    """
    parser = subparsers.add_parser(
        'batch',
        help='Compute satellite positions for a file of layout requests'
    )

    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')
    parser.add_argument('--requests', nargs='?', const='default', required=True, metavar='TSV_FILE',
                        help='Layout request file. Use built-in example if no file specified')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute batch subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)
    logger.info("=== SatLayout: Batch ===")

    if args.requests == 'default':
        requests_file: str = DEFAULT_REQUESTS
        logger.info("Using built-in example requests")
    else:
        requests_file = args.requests
        logger.info(f"Using requests: {requests_file}")

    requests = read_requests(requests_file)
    if not requests:
        logger.warning("No layout requests found")
        return

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    positions_tsv = output_dir / f"{args.prefix}.satlayout_positions.tsv"
    summary_txt = output_dir / f"{args.prefix}.satlayout_summary.txt"

    results = LayoutEngine().run_requests(requests)

    write_positions(results, str(positions_tsv))
    write_summary(results, str(summary_txt))

    logger.info(f"Positions TSV: {positions_tsv}")
    logger.info(f"Summary: {summary_txt}")

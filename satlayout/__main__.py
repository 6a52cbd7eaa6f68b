"""
SatLayout CLI

Command-line interface with subcommands for computing and previewing layouts.
"""

import argparse
import sys
from .cli import compute, batch, plot


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='satlayout',
        description='SatLayout: Satellite button placement for floating menus'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    compute.add_parser(subparsers)
    batch.add_parser(subparsers)
    plot.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'compute':
        compute.run(args)
    elif args.command == 'batch':
        batch.run(args)
    elif args.command == 'plot':
        plot.run(args)


if __name__ == "__main__":
    main()

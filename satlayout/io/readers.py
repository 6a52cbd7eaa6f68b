"""
I/O Readers

Handles reading of layout request files.
"""

from __future__ import annotations
from typing import Any, List, Optional
from io import StringIO
from pathlib import Path
import pandas as pd
import logging

from ..config import MenuConfig
from ..layout.types import (
    Point2D,
    Direction,
    ArcWinding,
    StraightLayoutSpec,
    ArcLayoutSpec,
    LayoutRequest,
)
from ..types import PathLike
from ..geometry import degrees_to_radians

logger = logging.getLogger(__name__)


class LayoutRequestReader:
    """Reads named layout requests from TSV files"""

    REQUIRED_COLUMNS = ('name', 'mode', 'count')
    OPTIONAL_COLUMNS = (
        'center_x', 'center_y',
        'direction', 'spacing', 'primary_size', 'satellite_size',
        'start_angle', 'end_angle', 'radius', 'winding',
    )

    @staticmethod
    def read(filepath: PathLike, config: Optional[MenuConfig] = None) -> List[LayoutRequest]:
        """
        Read layout requests

        Expected format (tab-separated, '#' starts a comment line):
        name     mode      count  center_x  center_y  direction  radius  ...
        toolbar  straight  3      300       500       top
        corner   arc       4      340       620                  100

        Empty cells and missing optional columns use the config defaults.
        Angles are given in degrees.

        Args:
            filepath: Path to request TSV file
            config: Defaults for unspecified values. If None, uses MenuConfig().

        Returns:
            List of LayoutRequest in file order

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a required column is missing or a value is not recognized
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Request file not found: {filepath}")

        config = config or MenuConfig()
        # Only whole lines starting with '#' are comments; '#' inside a cell is data
        with open(filepath, 'r') as f:
            lines = [line for line in f if not line.lstrip().startswith('#')]
        table: pd.DataFrame = pd.read_csv(StringIO(''.join(lines)), sep='\t', skip_blank_lines=True)
        table.columns = [str(col).strip() for col in table.columns]

        missing = [col for col in LayoutRequestReader.REQUIRED_COLUMNS if col not in table.columns]
        if missing:
            raise ValueError(f"Missing required column(s) in {filepath}: {', '.join(missing)}")

        unknown = [col for col in table.columns
                   if col not in LayoutRequestReader.REQUIRED_COLUMNS + LayoutRequestReader.OPTIONAL_COLUMNS]
        if unknown:
            logger.warning(f"Ignoring unknown column(s) in {filepath}: {', '.join(unknown)}")

        requests: List[LayoutRequest] = []
        for _, row in table.iterrows():
            requests.append(LayoutRequestReader._parse_row(row, config))

        logger.info(f"Loaded {len(requests)} layout requests from {filepath}")
        return requests

    @staticmethod
    def _parse_row(row: pd.Series, config: MenuConfig) -> LayoutRequest:
        """
        Build a LayoutRequest from one table row

        Args:
            row: Table row
            config: Defaults for empty cells

        Returns:
            LayoutRequest for the row
        """
        name = str(row['name']).strip()
        mode = str(row['mode']).strip().lower()
        try:
            count = _count(row['count'])
        except (TypeError, ValueError):
            raise ValueError(f"Row '{name}': count must be an integer, got {row['count']!r}") from None

        try:
            center = Point2D(
                float(_cell(row, 'center_x', 0.0)),
                float(_cell(row, 'center_y', 0.0)),
            )
            if mode == 'straight':
                spec = StraightLayoutSpec(
                    direction=Direction(str(_cell(row, 'direction', config.layout.direction)).strip().lower()),
                    spacing=float(_cell(row, 'spacing', config.layout.spacing)),
                    primary_size=float(_cell(row, 'primary_size', config.buttons.primary_size)),
                    satellite_size=float(_cell(row, 'satellite_size', config.buttons.satellite_size)),
                    count=count,
                    center=center,
                )
            elif mode == 'arc':
                spec = ArcLayoutSpec(
                    start_angle_rad=degrees_to_radians(float(_cell(row, 'start_angle', config.layout.start_angle))),
                    end_angle_rad=degrees_to_radians(float(_cell(row, 'end_angle', config.layout.end_angle))),
                    radius=float(_cell(row, 'radius', config.layout.radius)),
                    count=count,
                    center=center,
                    winding=ArcWinding(str(_cell(row, 'winding', config.layout.winding)).strip().lower()),
                )
            else:
                raise ValueError(f"unknown mode '{mode}' (expected 'straight' or 'arc')")
        except ValueError as e:
            raise ValueError(f"Row '{name}': {e}") from e

        return LayoutRequest(name=name, spec=spec)


def _count(value: Any) -> int:
    """Integer value of a count cell; NaN and fractional values are rejected"""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"not an integer: {value!r}")
    return int(number)


def _cell(row: pd.Series, column: str, default: Any) -> Any:
    """Value of `column` in `row`, or `default` when absent or empty"""
    if column not in row.index:
        return default
    value = row[column]
    if pd.isna(value) or (isinstance(value, str) and not value.strip()):
        return default
    return value


def read_requests(filepath: PathLike, config: Optional[MenuConfig] = None) -> List[LayoutRequest]:
    """
    Convenience function to read layout requests

    Args:
        filepath: Path to request TSV file
        config: Defaults for unspecified values

    Returns:
        List of LayoutRequest
    """
    return LayoutRequestReader.read(filepath, config)

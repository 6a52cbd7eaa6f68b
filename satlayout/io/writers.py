"""
I/O Writers

Handles writing of layout results in various formats.
"""

from __future__ import annotations
from typing import List, Sequence
from pathlib import Path
import pandas as pd
import logging

from ..geometry import distance, angle_between, radians_to_degrees
from ..layout.types import LayoutResult, StraightLayoutSpec, ArcLayoutSpec, Direction, ArcWinding
from ..types import PathLike

logger = logging.getLogger(__name__)

POSITION_COLUMNS = ['layout', 'mode', 'index', 'x', 'y', 'distance', 'angle_deg']


class PositionWriter:
    """Writes satellite positions in TSV format"""

    @staticmethod
    def to_dataframe(results: Sequence[LayoutResult]) -> pd.DataFrame:
        """
        Flatten layout results into one row per satellite

        Distance and angle are measured from each layout's center.

        Args:
            results: Layout results

        Returns:
            DataFrame with POSITION_COLUMNS
        """
        frames: List[pd.DataFrame] = []
        for result in results:
            if result.count == 0:
                continue
            df = result.to_dataframe()
            df.insert(0, 'mode', result.mode)
            df.insert(0, 'layout', result.name)
            df['distance'] = [distance(result.center, p) for p in result.positions]
            df['angle_deg'] = [radians_to_degrees(angle_between(result.center, p)) for p in result.positions]
            frames.append(df)

        if not frames:
            return pd.DataFrame(columns=POSITION_COLUMNS)
        return pd.concat(frames, ignore_index=True)[POSITION_COLUMNS]

    @staticmethod
    def write(results: Sequence[LayoutResult], output_file: PathLike) -> None:
        """
        Write positions of all layouts to a TSV file

        Args:
            results: Layout results
            output_file: Path to output TSV file
        """
        positions = PositionWriter.to_dataframe(results)
        if positions.empty:
            logger.warning("No positions to save")
            return

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        positions.round({'x': 4, 'y': 4, 'distance': 4, 'angle_deg': 4}).to_csv(
            output_file, sep='\t', index=False
        )
        logger.info(f"Positions saved to {output_file}")
        logger.info(f"Layouts: {positions['layout'].nunique()}, satellites: {len(positions)}")


def write_positions(results: Sequence[LayoutResult], output_file: PathLike) -> None:
    """Convenience function"""
    PositionWriter.write(results, output_file)


class SummaryWriter:
    """Writes layout summary in human-readable text format"""

    def write(self, results: Sequence[LayoutResult], output_file: PathLike) -> None:
        """
        Write one section per layout with its parameters and extents

        Args:
            results: Layout results
            output_file: Path to output summary file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w') as f:
            f.write("SatLayout Summary\n")
            f.write("=" * 50 + "\n\n")
            f.write(f"Layouts: {len(results)}\n")
            f.write(f"Satellites: {sum(r.count for r in results)}\n\n")

            for result in results:
                self._write_section(f, result)

        logger.info(f"Layout summary saved to {output_file}")

    @staticmethod
    def _write_section(f, result: LayoutResult) -> None:
        header = f"{result.name} ({result.mode})"
        f.write(header + "\n")
        f.write("-" * len(header) + "\n")
        f.write(f"Satellites: {result.count}\n")
        f.write(f"Center: ({result.center.x:.2f}, {result.center.y:.2f})\n")

        spec = result.spec
        if isinstance(spec, StraightLayoutSpec):
            f.write(f"Direction: {Direction(spec.direction).value}\n")
            f.write(f"Step: {spec.step:.2f} px "
                    f"(sizes {spec.primary_size:g}/{spec.satellite_size:g}, spacing {spec.spacing:g})\n")
        elif isinstance(spec, ArcLayoutSpec):
            f.write(f"Radius: {spec.radius:.2f} px\n")
            f.write(f"Angles: {radians_to_degrees(spec.start_angle_rad):.1f} to "
                    f"{radians_to_degrees(spec.end_angle_rad):.1f} deg ({ArcWinding(spec.winding).value})\n")

        if result.count > 0:
            min_x, min_y, max_x, max_y = result.bounds()
            f.write(f"Extents: x {min_x:.2f} to {max_x:.2f}, y {min_y:.2f} to {max_y:.2f}\n")
        else:
            f.write("No satellites placed\n")
        f.write("\n")


def write_summary(results: Sequence[LayoutResult], output_file: PathLike) -> None:
    """
    Convenience function to write summary

    Args:
        results: Layout results
        output_file: Output summary file path
    """
    writer = SummaryWriter()
    writer.write(results, output_file)

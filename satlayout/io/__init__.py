"""I/O utilities for SatLayout"""

from .readers import LayoutRequestReader, read_requests
from .writers import PositionWriter, write_positions, SummaryWriter, write_summary

__all__ = [
    'LayoutRequestReader', 'read_requests',
    'PositionWriter', 'write_positions',
    'SummaryWriter', 'write_summary']

"""
Type definitions for SatLayout

Common types used throughout the package for type checking and documentation.
Layout value objects live in `satlayout.layout.types`.
"""

from __future__ import annotations
from typing import Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Size = Tuple[float, float]
"""(width, height) in px"""

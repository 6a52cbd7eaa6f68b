"""
Shared pytest fixtures for SatLayout tests

Supports both development mode (python -m satlayout) and installed mode (pip install -e .)
"""
import pytest
from pathlib import Path
import sys

import matplotlib
matplotlib.use("Agg")

# Add repository root to Python path for development mode, before test modules import satlayout
#
# Structure:
#   satlayout-repo/               <- repo root (need to add this to sys.path)
#   └── satlayout/                <- package
#       ├── __init__.py
#       ├── cli/
#       └── tests/
#           └── conftest.py       <- we are here
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def requests_file(tmp_path) -> Path:
    """
    Small request file mixing both modes, defaults and comments
    """
    path = tmp_path / "requests.tsv"
    path.write_text(
        "# test requests\n"
        "name\tmode\tcount\tcenter_x\tcenter_y\tdirection\tspacing\tradius\tstart_angle\tend_angle\twinding\n"
        "line\tstraight\t3\t0\t0\tright\t10\t\t\t\t\n"
        "fan\tarc\t3\t0\t0\t\t\t100\t0\t180\tcounterclockwise\n"
        "defaults\tstraight\t2\t5\t5\t\t\t\t\t\t\n"
    )
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running SatLayout subcommands end to end"
    )

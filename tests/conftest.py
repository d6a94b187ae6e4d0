from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure(config):
    # make the in-repo package win over any installed copy
    if str(PROJECT_ROOT) in sys.path:
        sys.path.remove(str(PROJECT_ROOT))
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def open_grid():
    """Factory for wall-free grids of the given size."""
    from orienteering.core.grid import build_grid

    def _make(height: int, width: int):
        return build_grid(["." * width] * height, width, height)

    return _make

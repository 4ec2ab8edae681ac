"""
MapGrid Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from mapgrid import Coordinate, Extent, TileGrid


@pytest.fixture
def simple_grid():
    """Three-level grid anchored at (0, 0) with 256x256 tiles"""
    return TileGrid(
        [100.0, 50.0, 25.0],
        Extent(top=25600.0, right=25600.0, bottom=0.0, left=0.0),
        Coordinate(0.0, 0.0),
    )


@pytest.fixture
def per_level_grid():
    """Three-level grid with a different origin at each level"""
    return TileGrid(
        [40.0, 20.0, 10.0],
        Extent(top=5000.0, right=5000.0, bottom=-5000.0, left=-5000.0),
        [
            Coordinate(-5000.0, -5000.0),
            Coordinate(-4000.5, -3000.25),
            Coordinate(-1000.0, 250.0),
        ],
        tile_size=(128, 64),
    )

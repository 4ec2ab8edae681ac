"""
MapGrid Grid Module

Multi-resolution tile grid for tiled map rendering.
"""

from mapgrid.grid.base import TileGridProtocol
from mapgrid.grid.tile_grid import DEFAULT_TILE_SIZE, TileGrid, create_standard_web_grid

__all__ = [
    "DEFAULT_TILE_SIZE",
    "TileGrid",
    "TileGridProtocol",
    "create_standard_web_grid",
]

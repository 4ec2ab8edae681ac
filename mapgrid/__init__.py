"""
MapGrid - Tile indexing for multi-resolution web maps

Maps points in a flat map coordinate system to the tiles of a zoom pyramid
and back.

Quick Start:
    >>> import mapgrid as mg
    >>>
    >>> grid = mg.create_standard_web_grid(max_zoom=18)
    >>> tile = grid.get_tile_coord(10, mg.Coordinate(261845.7, 6250566.7))
    >>> extent = grid.get_tile_coord_extent(tile)
    >>>
    >>> # Find the nearest zoom level for a view resolution
    >>> z = grid.get_z_for_resolution(152.87)
"""

from mapgrid.core import (
    # Types
    Coordinate,
    Extent,
    Size,
    TileBounds,
    TileCoord,
    # Constants
    EPSG_3857_EXTENT,
    EPSG_3857_HALF_SIZE,
    # Exceptions
    IndexOutOfRangeError,
    InvalidConfigError,
    MapGridError,
)
from mapgrid.grid import (
    DEFAULT_TILE_SIZE,
    TileGrid,
    TileGridProtocol,
    create_standard_web_grid,
)

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "DEFAULT_TILE_SIZE",
    "EPSG_3857_EXTENT",
    "EPSG_3857_HALF_SIZE",
    "Extent",
    "IndexOutOfRangeError",
    "InvalidConfigError",
    "MapGridError",
    "Size",
    "TileBounds",
    "TileCoord",
    "TileGrid",
    "TileGridProtocol",
    "__version__",
    "create_standard_web_grid",
]

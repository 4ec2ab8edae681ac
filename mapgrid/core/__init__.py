"""
MapGrid Core Module

Value types, projection constants and exceptions.
"""

from mapgrid.core.exceptions import (
    MapGridError,
    InvalidConfigError,
    IndexOutOfRangeError,
)
from mapgrid.core.types import (
    Coordinate,
    Size,
    Extent,
    TileCoord,
    TileBounds,
)
from mapgrid.core.projection import EPSG_3857_HALF_SIZE, EPSG_3857_EXTENT

__all__ = [
    # Types
    "Coordinate",
    "Size",
    "Extent",
    "TileCoord",
    "TileBounds",
    # Constants
    "EPSG_3857_HALF_SIZE",
    "EPSG_3857_EXTENT",
    # Exceptions
    "MapGridError",
    "InvalidConfigError",
    "IndexOutOfRangeError",
]

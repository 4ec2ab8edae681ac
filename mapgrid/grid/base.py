"""
Tile Grid Protocol

Structural contract consumed by tile loading and rendering layers.
"""

from typing import Callable, Protocol, runtime_checkable

from mapgrid.core.types import Coordinate, Extent, TileBounds, TileCoord


@runtime_checkable
class TileGridProtocol(Protocol):
    """
    Multi-resolution tile pyramid

    Levels are indexed by z, from 0 (coarsest) to num_resolutions - 1
    (finest). Each level splits map space into tiles of a fixed pixel
    size anchored at an origin.
    """

    def get_resolution(self, z: int) -> float:
        """
        Map units per pixel at a zoom level

        Args:
            z: Zoom level

        Returns:
            Resolution of level z
        """
        ...

    def get_tile_coord(self, z: int, coordinate: Coordinate) -> TileCoord:
        """
        Tile containing a point

        Args:
            z: Zoom level
            coordinate: Point in map units

        Returns:
            TileCoord whose extent contains the point
        """
        ...

    def get_tile_coord_extent(self, tile_coord: TileCoord) -> Extent:
        """
        Spatial rectangle covered by a tile

        Args:
            tile_coord: Tile coordinate

        Returns:
            Extent of the tile in map units
        """
        ...

    def get_extent_tile_bounds(self, z: int, extent: Extent) -> TileBounds:
        """
        Tile indices intersecting an extent

        Args:
            z: Zoom level
            extent: Rectangle in map units

        Returns:
            TileBounds covering the extent at level z
        """
        ...

    def for_each_ancestor(
        self, tile_coord: TileCoord, visit: Callable[[int, TileBounds], bool]
    ) -> None:
        """Visit coarser levels covering a tile until visit returns True"""
        ...

    def get_z_for_resolution(self, resolution: float) -> int:
        """Zoom level whose resolution is nearest to the given one"""
        ...

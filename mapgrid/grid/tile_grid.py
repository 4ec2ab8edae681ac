"""
TileGrid Implementation

Maps map coordinates to tile indices across the levels of a tile pyramid,
and tile indices back to extents, centers and resolutions.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Iterator, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mapgrid.core.exceptions import IndexOutOfRangeError, InvalidConfigError
from mapgrid.core.projection import EPSG_3857_EXTENT, EPSG_3857_HALF_SIZE
from mapgrid.core.types import Coordinate, Extent, Size, TileBounds, TileCoord

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = Size(256, 256)

CoordinateLike = Union[Coordinate, Tuple[float, float]]
OriginLike = Union[CoordinateLike, Sequence[CoordinateLike]]


@dataclass(frozen=True)
class _SharedOrigin:
    """One origin for every level"""

    origin: Coordinate

    def get(self, z: int) -> Coordinate:
        return self.origin


@dataclass(frozen=True)
class _LevelOrigins:
    """One origin per level"""

    origins: Tuple[Coordinate, ...]

    def get(self, z: int) -> Coordinate:
        if not 0 <= z < len(self.origins):
            raise IndexOutOfRangeError(
                f"Zoom level {z} out of range [0, {len(self.origins)})"
            )
        return self.origins[z]


class TileGrid:
    """
    Multi-resolution tile grid

    Level z splits map space into tiles of tile_size pixels, each pixel
    covering resolutions[z] map units, with tile (0, 0) anchored at the
    level's origin. x grows with map x and y grows with map y; indices
    are unbounded and may be negative.

    The grid is immutable and every query is a pure function of its
    arguments, so one instance can be shared freely.

    Examples:
        >>> grid = TileGrid([100.0, 50.0, 25.0], Extent(1000, 1000, 0, 0), (0.0, 0.0))
        >>> grid.get_tile_coord(1, Coordinate(13000.0, 26000.0))
        TileCoord(z=1, x=1, y=2)
        >>> grid.get_tile_coord_extent(TileCoord(1, 1, 2))
        Extent(top=38400.0, right=25600.0, bottom=25600.0, left=12800.0)
        >>> grid.get_z_for_resolution(75.0)
        1
    """

    def __init__(
        self,
        resolutions: Sequence[float],
        extent: Extent,
        origin: OriginLike,
        tile_size: Union[Size, Tuple[int, int], None] = None,
    ):
        """
        Initialize tile grid

        Args:
            resolutions: Map units per pixel for each level, strictly decreasing
            extent: Full extent of the pyramid (informational)
            origin: Single origin for all levels, or one origin per level
            tile_size: Tile size in pixels (default: 256x256)

        Raises:
            InvalidConfigError: If resolutions, origin or tile size are invalid
        """
        self._resolutions = _validate_resolutions(resolutions)
        self._extent = extent
        self._origin = _resolve_origin(origin, len(self._resolutions))
        self._tile_size = _validate_tile_size(tile_size)

        logger.debug(
            "Created tile grid: %d levels, %s origin, %dx%d tiles",
            len(self._resolutions),
            "shared" if isinstance(self._origin, _SharedOrigin) else "per-level",
            self._tile_size.width,
            self._tile_size.height,
        )

    @classmethod
    def create_standard_web_grid(cls, max_zoom: int) -> "TileGrid":
        """
        Grid of the conventional web map tiling scheme (EPSG:3857)

        Level z has resolution HALF_SIZE / (128 * 2**z), so a single
        256x256 tile covers the whole world at level 0. Tiles are anchored
        at the world's top-left corner.

        Args:
            max_zoom: Finest zoom level to include

        Returns:
            TileGrid with levels 0..max_zoom
        """
        if max_zoom < 0:
            raise InvalidConfigError(f"max_zoom must be non-negative, got {max_zoom}")

        resolutions = [EPSG_3857_HALF_SIZE / (128 * 2**z) for z in range(max_zoom + 1)]
        origin = Coordinate(-EPSG_3857_HALF_SIZE, EPSG_3857_HALF_SIZE)
        return cls(resolutions, EPSG_3857_EXTENT, origin, Size(256, 256))

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def resolutions(self) -> Tuple[float, ...]:
        return self._resolutions

    @property
    def num_resolutions(self) -> int:
        return len(self._resolutions)

    @property
    def max_zoom(self) -> int:
        return len(self._resolutions) - 1

    @property
    def extent(self) -> Extent:
        return self._extent

    @property
    def tile_size(self) -> Size:
        return self._tile_size

    def get_origin(self, z: int) -> Coordinate:
        """
        Origin of a zoom level

        Raises:
            IndexOutOfRangeError: If the grid has per-level origins and z is
                outside [0, num_resolutions)
        """
        return self._origin.get(z)

    def get_resolution(self, z: int) -> float:
        """
        Resolution of a zoom level

        Raises:
            IndexOutOfRangeError: If z is outside [0, num_resolutions)
        """
        if not 0 <= z < len(self._resolutions):
            raise IndexOutOfRangeError(
                f"Zoom level {z} out of range [0, {len(self._resolutions)})"
            )
        return self._resolutions[z]

    def get_tile_coord_resolution(self, tile_coord: TileCoord) -> float:
        return self.get_resolution(tile_coord.z)

    # -------------------------------------------------------------------------
    # Coordinate <-> tile transforms
    # -------------------------------------------------------------------------

    def get_tile_coord(self, z: int, coordinate: CoordinateLike) -> TileCoord:
        """
        Tile containing a point

        A point on a tile boundary belongs to the tile whose lower-left
        corner lies on that boundary.

        Args:
            z: Zoom level
            coordinate: Point in map units

        Returns:
            TileCoord at level z (not clamped to the grid extent)
        """
        if not isinstance(coordinate, Coordinate):
            coordinate = Coordinate(*coordinate)
        origin = self.get_origin(z)
        resolution = self.get_resolution(z)
        x = math.floor((coordinate.x - origin.x) / (self._tile_size.width * resolution))
        y = math.floor((coordinate.y - origin.y) / (self._tile_size.height * resolution))
        return TileCoord(z, x, y)

    def get_tile_coords(
        self, z: int, xs: ArrayLike, ys: ArrayLike
    ) -> Tuple[NDArray[np.int64], NDArray[np.int64]]:
        """
        Tile indices for many points at once

        Same floor semantics as get_tile_coord.

        Args:
            z: Zoom level
            xs: Map x coordinates
            ys: Map y coordinates (broadcast against xs)

        Returns:
            (x_indices, y_indices) integer arrays

        Raises:
            ValueError: If any coordinate is NaN or infinite
        """
        origin = self.get_origin(z)
        resolution = self.get_resolution(z)
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
            raise ValueError("Coordinates must be finite")
        x_idx = np.floor((xs - origin.x) / (self._tile_size.width * resolution))
        y_idx = np.floor((ys - origin.y) / (self._tile_size.height * resolution))
        return x_idx.astype(np.int64), y_idx.astype(np.int64)

    def get_tile_coord_extent(self, tile_coord: TileCoord) -> Extent:
        """
        Spatial rectangle covered by a tile

        Args:
            tile_coord: Tile coordinate

        Returns:
            Extent of the tile in map units
        """
        origin = self.get_origin(tile_coord.z)
        resolution = self.get_resolution(tile_coord.z)
        tile_width = self._tile_size.width * resolution
        tile_height = self._tile_size.height * resolution
        left = origin.x + tile_coord.x * tile_width
        bottom = origin.y + tile_coord.y * tile_height
        return Extent(top=bottom + tile_height, right=left + tile_width, bottom=bottom, left=left)

    def get_tile_coord_center(self, tile_coord: TileCoord) -> Coordinate:
        """Center point of a tile"""
        origin = self.get_origin(tile_coord.z)
        resolution = self.get_resolution(tile_coord.z)
        x = origin.x + (tile_coord.x + 0.5) * self._tile_size.width * resolution
        y = origin.y + (tile_coord.y + 0.5) * self._tile_size.height * resolution
        return Coordinate(x, y)

    def get_extent_tile_bounds(self, z: int, extent: Extent) -> TileBounds:
        """
        Tile indices intersecting an extent

        Args:
            z: Zoom level
            extent: Rectangle in map units

        Returns:
            TileBounds spanning the tiles of the extent's corners
        """
        top_right = self.get_tile_coord(z, Coordinate(extent.right, extent.top))
        bottom_left = self.get_tile_coord(z, Coordinate(extent.left, extent.bottom))
        return TileBounds.bounding(top_right, bottom_left)

    # -------------------------------------------------------------------------
    # Level traversal
    # -------------------------------------------------------------------------

    def iter_ancestors(self, tile_coord: TileCoord) -> Iterator[Tuple[int, TileBounds]]:
        """
        Yield (z, bounds) for every coarser level, finest first

        bounds are the level-z tiles covering the extent of tile_coord.
        Nothing is yielded for a level-0 tile.
        """
        tile_extent = self.get_tile_coord_extent(tile_coord)
        for z in range(tile_coord.z - 1, -1, -1):
            yield z, self.get_extent_tile_bounds(z, tile_extent)

    def for_each_ancestor(
        self, tile_coord: TileCoord, visit: Callable[[int, TileBounds], bool]
    ) -> None:
        """
        Visit coarser levels covering a tile

        visit(z, bounds) is called for z = tile_coord.z - 1 down to 0 and
        traversal stops as soon as it returns a truthy value. Useful for
        finding a loaded parent tile to stand in for a missing one.

        Args:
            tile_coord: Starting tile
            visit: Callback; return True to stop
        """
        for z, bounds in self.iter_ancestors(tile_coord):
            if visit(z, bounds):
                return

    def get_z_for_resolution(self, resolution: float) -> int:
        """
        Zoom level with the resolution nearest to the given one

        When the query lies exactly halfway between two levels the finer
        level wins. Queries coarser than level 0 return 0 and queries finer
        than the last level return the last level.

        Args:
            resolution: Map units per pixel

        Returns:
            Zoom level
        """
        resolutions = self._resolutions
        for z, level_resolution in enumerate(resolutions):
            if level_resolution == resolution:
                return z
            if level_resolution < resolution:
                if z == 0:
                    return z
                if resolution - level_resolution <= resolutions[z - 1] - resolution:
                    return z
                return z - 1
        return len(resolutions) - 1

    def __repr__(self):
        return (
            f"<TileGrid: {self.num_resolutions} levels>\n"
            f"  Resolutions: {self._resolutions[0]:g} .. {self._resolutions[-1]:g}\n"
            f"  Tile size: {self._tile_size.width}x{self._tile_size.height}"
        )


def create_standard_web_grid(max_zoom: int) -> TileGrid:
    """Standard EPSG:3857 web map grid with levels 0..max_zoom"""
    return TileGrid.create_standard_web_grid(max_zoom)


# -------------------------------------------------------------------------
# Internal helpers
# -------------------------------------------------------------------------


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_coordinate(value) -> Coordinate:
    """Normalize a Coordinate or (x, y) pair"""
    if isinstance(value, Coordinate):
        if not (_is_number(value.x) and _is_number(value.y)):
            raise InvalidConfigError(f"Coordinate values must be numbers, got {value!r}")
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidConfigError(f"Expected a coordinate or (x, y) pair, got {value!r}")
    if not (_is_number(x) and _is_number(y)):
        raise InvalidConfigError(f"Expected a coordinate or (x, y) pair, got {value!r}")
    return Coordinate(float(x), float(y))


def _validate_resolutions(resolutions: Sequence[float]) -> Tuple[float, ...]:
    try:
        items = list(resolutions)
        if any(isinstance(r, (bool, np.bool_)) for r in items):
            raise ValueError("booleans are not resolutions")
        values = np.asarray(items, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(f"Resolutions must be numbers: {e}")

    if values.ndim != 1 or values.size == 0:
        raise InvalidConfigError("Resolutions must be a non-empty sequence")
    if not np.all(np.isfinite(values)) or np.any(values <= 0):
        raise InvalidConfigError(f"Resolutions must be positive, got {values.tolist()}")
    if np.any(np.diff(values) >= 0):
        raise InvalidConfigError(
            f"Resolutions must be strictly decreasing, got {values.tolist()}"
        )

    return tuple(float(r) for r in values)


def _resolve_origin(origin: OriginLike, num_resolutions: int):
    """Choose between a shared origin and per-level origins"""
    if isinstance(origin, Coordinate):
        return _SharedOrigin(_as_coordinate(origin))

    if isinstance(origin, (list, tuple, np.ndarray)):
        items = list(origin)
        if len(items) == 2 and all(_is_number(v) for v in items):
            return _SharedOrigin(_as_coordinate(items))
        if len(items) != num_resolutions:
            raise InvalidConfigError(
                f"Expected {num_resolutions} per-level origins, got {len(items)}"
            )
        return _LevelOrigins(tuple(_as_coordinate(item) for item in items))

    raise InvalidConfigError(
        f"Origin must be a coordinate or a sequence of coordinates, got {origin!r}"
    )


def _validate_tile_size(tile_size) -> Size:
    if tile_size is None:
        return DEFAULT_TILE_SIZE
    if not isinstance(tile_size, Size):
        try:
            width, height = tile_size
        except (TypeError, ValueError):
            raise InvalidConfigError(f"Invalid tile size: {tile_size!r}")
        tile_size = Size(width, height)
    if not (_is_number(tile_size.width) and _is_number(tile_size.height)):
        raise InvalidConfigError(f"Invalid tile size: {tile_size!r}")
    if tile_size.width <= 0 or tile_size.height <= 0:
        raise InvalidConfigError(f"Tile size must be positive, got {tile_size!r}")
    return tile_size

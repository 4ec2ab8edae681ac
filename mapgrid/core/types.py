"""
Value types

Points, sizes, extents and tile indices exchanged with a TileGrid.
All types are immutable; every query builds new instances.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Coordinate:
    """A point in map units"""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Tile size in pixels"""

    width: int
    height: int


@dataclass(frozen=True)
class Extent:
    """
    Axis-aligned rectangle in map units

    Attributes:
        top: Maximum y
        right: Maximum x
        bottom: Minimum y
        left: Minimum x

    Examples:
        >>> extent = Extent(top=10.0, right=20.0, bottom=0.0, left=5.0)
        >>> extent.width, extent.height
        (15.0, 10.0)
        >>> extent.center
        Coordinate(x=12.5, y=5.0)
    """

    top: float
    right: float
    bottom: float
    left: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center(self) -> Coordinate:
        return Coordinate((self.left + self.right) / 2, (self.bottom + self.top) / 2)

    def contains_coordinate(self, coordinate: Coordinate) -> bool:
        """Whether the coordinate lies inside the extent (edges included)"""
        return (
            self.left <= coordinate.x <= self.right
            and self.bottom <= coordinate.y <= self.top
        )

    def intersects(self, other: "Extent") -> bool:
        """Whether two extents overlap (touching edges count)"""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.bottom <= other.top
            and self.top >= other.bottom
        )

    def to_bbox(self) -> Tuple[float, float, float, float]:
        """Bounding box as (minx, miny, maxx, maxy)"""
        return (self.left, self.bottom, self.right, self.top)

    @classmethod
    def from_bbox(cls, bbox: Tuple[float, float, float, float]) -> "Extent":
        minx, miny, maxx, maxy = bbox
        return cls(top=maxy, right=maxx, bottom=miny, left=minx)


@dataclass(frozen=True)
class TileCoord:
    """
    Tile coordinate (z, x, y)

    z indexes the resolution table; x and y are unbounded tile indices
    in that level's grid and may be negative.

    Examples:
        >>> str(TileCoord(3, 5, -2))
        '3/5/-2'
        >>> TileCoord.from_string('3/5/-2')
        TileCoord(z=3, x=5, y=-2)
    """

    z: int
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"

    @classmethod
    def from_string(cls, value: str) -> "TileCoord":
        """Parse a "z/x/y" string"""
        try:
            parts = value.split("/")
            if len(parts) != 3:
                raise ValueError(f"Invalid tile coordinate format: {value}")

            z, x, y = (int(p) for p in parts)
            return cls(z, x, y)
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Invalid tile coordinate '{value}': {e}")


@dataclass(frozen=True)
class TileBounds:
    """
    Inclusive rectangle of tile indices at a fixed zoom level

    Attributes:
        min_x: Smallest x index
        max_x: Largest x index
        min_y: Smallest y index
        max_y: Largest y index
    """

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def bounding(cls, *tile_coords: TileCoord) -> "TileBounds":
        """
        Smallest bounds covering all given tile coordinates

        Args:
            *tile_coords: One or more tile coordinates

        Returns:
            TileBounds with min/max taken on each axis
        """
        if not tile_coords:
            raise ValueError("At least one tile coordinate is required")

        xs = [tc.x for tc in tile_coords]
        ys = [tc.y for tc in tile_coords]
        return cls(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))

    @property
    def width(self) -> int:
        """Number of tile columns"""
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        """Number of tile rows"""
        return self.max_y - self.min_y + 1

    def contains(self, tile_coord: TileCoord) -> bool:
        return (
            self.min_x <= tile_coord.x <= self.max_x
            and self.min_y <= tile_coord.y <= self.max_y
        )

    def iter_tile_coords(self, z: int) -> Iterator[TileCoord]:
        """Yield every tile coordinate in the bounds, column by column"""
        for x in range(self.min_x, self.max_x + 1):
            for y in range(self.min_y, self.max_y + 1):
                yield TileCoord(z, x, y)

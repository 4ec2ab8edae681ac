"""
Tests for the standard web map grid
"""

import pytest

from mapgrid import EPSG_3857_EXTENT, EPSG_3857_HALF_SIZE, create_standard_web_grid
from mapgrid.core.exceptions import InvalidConfigError
from mapgrid.core.types import Coordinate, Size, TileCoord
from mapgrid.grid.tile_grid import TileGrid


class TestStandardWebGrid:
    """Test create_standard_web_grid"""

    @pytest.fixture
    def grid(self):
        return create_standard_web_grid(2)

    def test_levels(self, grid):
        assert grid.num_resolutions == 3
        assert grid.max_zoom == 2

    def test_resolutions_halve(self, grid):
        r0 = grid.resolutions[0]
        assert r0 == pytest.approx(156543.03392804097)
        assert grid.resolutions[1] == pytest.approx(r0 / 2)
        assert grid.resolutions[2] == pytest.approx(r0 / 4)

    def test_configuration(self, grid):
        assert grid.tile_size == Size(256, 256)
        assert grid.extent == EPSG_3857_EXTENT
        assert grid.get_origin(0) == Coordinate(-EPSG_3857_HALF_SIZE, EPSG_3857_HALF_SIZE)

    def test_origin_tile(self, grid):
        origin = grid.get_origin(0)
        assert grid.get_tile_coord(0, origin) == TileCoord(0, 0, 0)

    def test_level_zero_covers_world(self, grid):
        extent = grid.get_tile_coord_extent(TileCoord(0, 0, -1))
        assert extent.left == pytest.approx(EPSG_3857_EXTENT.left)
        assert extent.right == pytest.approx(EPSG_3857_EXTENT.right)
        assert extent.bottom == pytest.approx(EPSG_3857_EXTENT.bottom)
        assert extent.top == pytest.approx(EPSG_3857_EXTENT.top)

    def test_world_center(self, grid):
        """Test y indices grow northward from the top-left origin"""
        center = Coordinate(0.0, 0.0)
        assert grid.get_tile_coord(1, center) == TileCoord(1, 1, -1)
        assert grid.get_tile_coord(2, Coordinate(-1.0, 1.0)) == TileCoord(2, 1, -2)

    def test_classmethod_equivalent(self, grid):
        other = TileGrid.create_standard_web_grid(2)
        assert other.resolutions == grid.resolutions
        assert other.get_origin(0) == grid.get_origin(0)

    def test_zoom_for_resolution(self):
        grid = create_standard_web_grid(18)
        for z in range(19):
            assert grid.get_z_for_resolution(grid.get_resolution(z)) == z

        # Between levels 9 and 10, closer to 10
        assert grid.get_z_for_resolution(160.0) == 10

    def test_roundtrip(self):
        grid = create_standard_web_grid(5)
        for z in range(6):
            n = 2**z
            for x in range(n):
                for y in range(-n, 0):
                    tile = TileCoord(z, x, y)
                    assert grid.get_tile_coord(z, grid.get_tile_coord_center(tile)) == tile

    def test_zero_max_zoom(self):
        grid = create_standard_web_grid(0)
        assert grid.num_resolutions == 1

    def test_negative_max_zoom(self):
        with pytest.raises(InvalidConfigError):
            create_standard_web_grid(-1)

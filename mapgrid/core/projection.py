"""
Projection constants

World bounds of the spherical web mercator projection (EPSG:3857).
"""

from mapgrid.core.types import Extent

# Half the side of the square mercator world, in meters (pi * 6378137)
EPSG_3857_HALF_SIZE = 20037508.342789244

EPSG_3857_EXTENT = Extent(
    top=EPSG_3857_HALF_SIZE,
    right=EPSG_3857_HALF_SIZE,
    bottom=-EPSG_3857_HALF_SIZE,
    left=-EPSG_3857_HALF_SIZE,
)

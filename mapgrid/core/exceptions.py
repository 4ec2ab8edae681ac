"""
MapGrid Exceptions

Exception hierarchy for error handling.
"""


class MapGridError(Exception):
    """Base exception for MapGrid"""

    pass


class InvalidConfigError(MapGridError, ValueError):
    """Tile grid configuration is invalid"""

    pass


class IndexOutOfRangeError(MapGridError, IndexError):
    """Zoom level outside the configured resolution table"""

    pass

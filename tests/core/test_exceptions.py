"""
Tests for exceptions
"""

import pytest

from mapgrid.core.exceptions import (
    IndexOutOfRangeError,
    InvalidConfigError,
    MapGridError,
)


class TestExceptions:
    """Test exception hierarchy"""

    def test_base_exception(self):
        """Test MapGridError"""
        with pytest.raises(MapGridError):
            raise MapGridError("Test error")

    def test_invalid_config_error(self):
        """Test InvalidConfigError inherits from MapGridError and ValueError"""
        with pytest.raises(MapGridError):
            raise InvalidConfigError("Bad resolutions")

        with pytest.raises(ValueError):
            raise InvalidConfigError("Bad resolutions")

    def test_index_out_of_range_error(self):
        """Test IndexOutOfRangeError inherits from MapGridError and IndexError"""
        with pytest.raises(MapGridError):
            raise IndexOutOfRangeError("z=7")

        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("z=7")

    def test_exception_messages(self):
        """Test exception messages are preserved"""
        msg = "Custom error message"

        try:
            raise InvalidConfigError(msg)
        except InvalidConfigError as e:
            assert str(e) == msg

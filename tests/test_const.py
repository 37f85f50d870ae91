"""
Tests for constants.
"""

from kvschema import __version__
from kvschema.const import APP_NAME, APP_VERSION, INTEGER_MAX, INTEGER_MIN


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "kvschema"
    assert APP_VERSION == __version__
    assert INTEGER_MAX == 9223372036854775807
    assert INTEGER_MIN == -9223372036854775808

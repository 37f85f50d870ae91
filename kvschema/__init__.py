"""
Parser and validator for flat key/value config files and their schemas.
"""

from .const import APP_VERSION as __version__
from .config import (
    Config,
    ConfigEntry,
    ParseError,
    Schema,
    ValidationError,
    ValueType,
    validate,
)

__all__ = [
    "__version__",
    "Config",
    "ConfigEntry",
    "Schema",
    "ValueType",
    "ParseError",
    "ValidationError",
    "validate",
]

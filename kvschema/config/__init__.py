"""
Config and schema parsing and validation.
"""

from .lexer import Lexer, Line, LineType, MalformedLineError, ParseError
from .loader import ConfigError, ConfigLoader
from .parser import Config, ConfigEntry
from .schema import Schema, UnknownTypeError, ValueType
from .validator import (
    MissingKey,
    TypeMismatch,
    UnknownKey,
    ValidationError,
    ValidationResult,
    validate,
)

__all__ = [
    "Lexer",
    "Line",
    "LineType",
    "ParseError",
    "MalformedLineError",
    "UnknownTypeError",
    "Config",
    "ConfigEntry",
    "Schema",
    "ValueType",
    "ValidationError",
    "TypeMismatch",
    "UnknownKey",
    "MissingKey",
    "ValidationResult",
    "validate",
    "ConfigError",
    "ConfigLoader",
]

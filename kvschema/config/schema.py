"""
Schema parsing: declared keys and their scalar value types.

Schema text uses the same line syntax as config text, with the value
restricted to one of the type names:

    endpoint = string
    debug = bool
    retry = integer
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

from ..const import INTEGER_MAX, INTEGER_MIN
from .lexer import Lexer, ParseError


INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class ValueType(Enum):
    """Scalar value types a schema key can declare."""
    STRING = "string"    # any value
    BOOL = "bool"        # true or false
    INTEGER = "integer"  # signed 64-bit

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "ValueType | None":
        """Look up a type by its exact (case-sensitive) name."""
        try:
            return cls(token)
        except ValueError:
            return None

    def accepts(self, value: str) -> bool:
        """Check whether a raw config value is valid for this type."""
        if self is ValueType.BOOL:
            return value in ("true", "false")
        if self is ValueType.INTEGER:
            if not INTEGER_PATTERN.fullmatch(value):
                return False
            return INTEGER_MIN <= int(value) <= INTEGER_MAX
        return True


class UnknownTypeError(ParseError):
    """A schema line whose value is not a known type name."""

    def __init__(self, key: str, token: str, line: int = 0):
        self.key = key
        self.token = token
        super().__init__(f"unknown type: {token}", line)


@dataclass(frozen=True)
class Schema:
    """
    Parsed schema: key -> declared ValueType.

    Keys keep the order of their first declaration; a later declaration of
    the same key replaces the type.
    """
    types: Mapping[str, ValueType] = field(default_factory=dict)
    filename: str = "<string>"

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", MappingProxyType(dict(self.types)))

    @classmethod
    def parse(cls, source: str, filename: str = "<string>") -> "Schema":
        """Parse schema text. See parse_schema()."""
        return parse_schema(source, filename)

    def get(self, key: str) -> ValueType | None:
        """Get declared type for key or None."""
        return self.types.get(key)

    def items(self):
        return self.types.items()

    def __getitem__(self, key: str) -> ValueType:
        return self.types[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, key: object) -> bool:
        return key in self.types


def parse_schema(source: str, filename: str = "<string>") -> Schema:
    """
    Parse schema text.

    A leading '-' on a schema key is accepted and has no effect.

    Args:
        source: Schema source text
        filename: Filename kept on the result for diagnostics

    Returns:
        Parsed Schema

    Raises:
        MalformedLineError: On a line that is not a comment, blank, or pair
        UnknownTypeError: On a value that is not string, bool or integer
    """
    types: dict[str, ValueType] = {}

    for line in Lexer(source, filename).pairs():
        value_type = ValueType.from_token(line.value)
        if value_type is None:
            raise UnknownTypeError(line.key, line.value, line.number)
        types[line.key] = value_type

    return Schema(types=types, filename=filename)

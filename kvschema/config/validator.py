"""
Validation of a parsed Config against a Schema.

All problems are collected in a single pass and returned as data:
- TypeMismatch: value does not fit the declared type
- UnknownKey: config key not declared in the schema
- MissingKey: schema key with no config entry

Entries marked ignore_error ("-key = value") suppress their own
TypeMismatch/UnknownKey but never MissingKey.
"""

from dataclasses import dataclass, field

from .parser import Config
from .schema import Schema, ValueType


@dataclass(frozen=True)
class ValidationError:
    """Base class for a single validation problem."""
    key: str


@dataclass(frozen=True)
class TypeMismatch(ValidationError):
    """Config value cannot be interpreted as the schema type."""
    expected: ValueType
    actual_value: str

    def __str__(self) -> str:
        return f"'{self.key}': expected {self.expected}, got '{self.actual_value}'"


@dataclass(frozen=True)
class UnknownKey(ValidationError):
    """Key present in config but absent from schema."""

    def __str__(self) -> str:
        return f"'{self.key}': unknown key (not in schema)"


@dataclass(frozen=True)
class MissingKey(ValidationError):
    """Key declared in schema but absent from config."""

    def __str__(self) -> str:
        return f"'{self.key}': missing (required by schema)"


@dataclass
class ValidationResult:
    """Result of validating a config against a schema."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid


def validate(config: Config, schema: Schema) -> list[ValidationError]:
    """
    Validate config against schema.

    Errors for config entries come first, in config order, followed by
    MissingKey errors in schema order. Each entry is checked on its own,
    so duplicate keys are reported independently.

    Args:
        config: Parsed config
        schema: Parsed schema

    Returns:
        List of validation errors (empty if config is valid)
    """
    errors: list[ValidationError] = []

    for entry in config:
        expected = schema.get(entry.key)
        if expected is None:
            if not entry.ignore_error:
                errors.append(UnknownKey(entry.key))
        elif not expected.accepts(entry.value) and not entry.ignore_error:
            errors.append(TypeMismatch(entry.key, expected, entry.value))

    present = set(config.keys())
    for key in schema:
        if key not in present:
            errors.append(MissingKey(key))

    return errors

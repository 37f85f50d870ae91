"""
Config and schema loader with file reading and validation.
"""

from pathlib import Path

from ..logging import get_logger
from .lexer import ParseError
from .parser import Config, parse_config
from .schema import Schema, parse_schema
from .validator import ValidationResult, validate


logger = get_logger("config.loader")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"File not found: {path}")

    if not path.is_file():
        raise ConfigError(f"Not a file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e


class ConfigLoader:
    """
    Loads config and schema text from files or strings and validates them.

    Usage:
        loader = ConfigLoader()
        config = loader.load_config_file("app.conf")
        schema = loader.load_schema_file("app.schema")
        result = loader.validate(config, schema)
    """

    def __init__(self):
        self.last_config: Config | None = None
        self.last_schema: Schema | None = None

    def load_config_file(self, path: str | Path) -> Config:
        """
        Load config from a file.

        Args:
            path: Path to the config file

        Returns:
            Parsed Config

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        path = Path(path)
        logger.debug(f"Reading config file {path}")
        return self.load_config_string(_read_text(path), str(path))

    def load_schema_file(self, path: str | Path) -> Schema:
        """
        Load schema from a file.

        Args:
            path: Path to the schema file

        Returns:
            Parsed Schema

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        path = Path(path)
        logger.debug(f"Reading schema file {path}")
        return self.load_schema_string(_read_text(path), str(path))

    def load_config_string(self, source: str, filename: str = "<string>") -> Config:
        """
        Load config from a string.

        Raises:
            ConfigError: If config cannot be parsed
        """
        try:
            config = parse_config(source, filename)
        except ParseError as e:
            raise ConfigError(f"Failed to parse config {filename}: {e}") from e

        logger.debug(f"Parsed {len(config)} config entries from {filename}")
        self.last_config = config
        return config

    def load_schema_string(self, source: str, filename: str = "<string>") -> Schema:
        """
        Load schema from a string.

        Raises:
            ConfigError: If schema cannot be parsed
        """
        try:
            schema = parse_schema(source, filename)
        except ParseError as e:
            raise ConfigError(f"Failed to parse schema {filename}: {e}") from e

        logger.debug(f"Parsed {len(schema)} schema keys from {filename}")
        self.last_schema = schema
        return schema

    def validate(self, config: Config, schema: Schema) -> ValidationResult:
        """
        Validate config against schema and log every problem.

        Args:
            config: Parsed config
            schema: Parsed schema

        Returns:
            ValidationResult with all errors (empty if valid)
        """
        result = ValidationResult(errors=validate(config, schema))

        for error in result.errors:
            logger.debug(f"{config.filename}: {error}")

        if result:
            logger.info(f"{config.filename} is valid against {schema.filename}")
        else:
            logger.info(f"{config.filename}: {len(result.errors)} validation error(s)")

        return result


def load_config(path: str | Path) -> Config:
    """
    Convenience function to load config from a file.

    Args:
        path: Path to the config file

    Returns:
        Parsed Config
    """
    loader = ConfigLoader()
    return loader.load_config_file(path)


def load_schema(path: str | Path) -> Schema:
    """Convenience function to load a schema from a file."""
    loader = ConfigLoader()
    return loader.load_schema_file(path)

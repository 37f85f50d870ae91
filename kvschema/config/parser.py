"""
Parser for runtime config text.

Turns the lexer's key/value lines into an ordered, immutable Config.
Values stay raw strings; type interpretation happens during validation.
"""

from dataclasses import dataclass
from typing import Iterator

from .lexer import Lexer


@dataclass(frozen=True)
class ConfigEntry:
    """
    A single key/value entry from config text.

    Examples:
        endpoint = localhost:3000  -> ConfigEntry("endpoint", "localhost:3000")
        -retry = 3                 -> ConfigEntry("retry", "3", ignore_error=True)
    """
    key: str
    value: str
    ignore_error: bool = False
    line: int = 0

    def __repr__(self) -> str:
        flag = "-" if self.ignore_error else ""
        return f"ConfigEntry({flag}{self.key}, {self.value!r})"


@dataclass(frozen=True)
class Config:
    """
    Parsed config: entries in source line order.

    Duplicate keys are kept as separate entries.
    """
    entries: tuple[ConfigEntry, ...] = ()
    filename: str = "<string>"

    @classmethod
    def parse(cls, source: str, filename: str = "<string>") -> "Config":
        """Parse config text. See parse_config()."""
        return parse_config(source, filename)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get value of the first entry with given key."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return default

    def get_all(self, key: str) -> list[ConfigEntry]:
        """Get all entries with given key."""
        return [e for e in self.entries if e.key == key]

    def keys(self) -> list[str]:
        """Get distinct keys in order of first occurrence."""
        return list(dict.fromkeys(e.key for e in self.entries))

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(e.key == key for e in self.entries)


def parse_config(source: str, filename: str = "<string>") -> Config:
    """
    Parse config text.

    Args:
        source: Config source text
        filename: Filename kept on the result for diagnostics

    Returns:
        Parsed Config

    Raises:
        MalformedLineError: On the first line that is not a comment,
            blank, or key/value pair
    """
    entries = tuple(
        ConfigEntry(
            key=line.key,
            value=line.value,
            ignore_error=line.ignore_error,
            line=line.number,
        )
        for line in Lexer(source, filename).pairs()
    )
    return Config(entries=entries, filename=filename)

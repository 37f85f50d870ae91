"""
Line tokenizer shared by the config and schema parsers.

Each source line is classified as exactly one of:
- Blank lines (empty after trimming whitespace)
- Comments (first non-whitespace character is '#' or ';')
- Key/value pairs split at the first '=' (the value may contain more '=')

A key written with a leading '-' (e.g. "-retry = 3") marks the entry
as ignore_error.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from ..const import COMMENT_PREFIXES, DELIMITER, IGNORE_ERROR_PREFIX


class LineType(Enum):
    """Classification of a single source line."""

    COMMENT = auto()  # # comment, ; comment
    BLANK = auto()    # empty or whitespace only
    PAIR = auto()     # key = value


@dataclass(frozen=True)
class Line:
    """A single classified line from the lexer."""

    type: LineType
    number: int
    raw: str = ""
    key: str = ""
    value: str = ""
    ignore_error: bool = False

    def __repr__(self) -> str:
        if self.type is LineType.PAIR:
            flag = "-" if self.ignore_error else ""
            return f"Line({self.number}, {flag}{self.key!r} = {self.value!r})"
        return f"Line({self.number}, {self.type.name})"


class ParseError(Exception):
    """Base class for fatal config and schema parse errors."""

    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f"line {line}: {message}")


class MalformedLineError(ParseError):
    """A line that is neither blank, a comment, nor a valid key/value pair."""

    def __init__(self, line: int, content: str):
        self.content = content
        super().__init__(f"invalid syntax: {content}", line)


def tokenize_line(text: str, number: int = 1) -> Line:
    """
    Classify one line of text.

    Args:
        text: Raw line content without the line terminator
        number: 1-based line number used in errors

    Returns:
        Classified Line

    Raises:
        MalformedLineError: If the line has no '=' or an empty key
    """
    stripped = text.strip()

    if not stripped:
        return Line(LineType.BLANK, number, raw=text)

    if stripped.startswith(COMMENT_PREFIXES):
        return Line(LineType.COMMENT, number, raw=text)

    key, delimiter, value = stripped.partition(DELIMITER)
    if not delimiter:
        raise MalformedLineError(number, text)

    key = key.strip()
    ignore_error = key.startswith(IGNORE_ERROR_PREFIX)
    if ignore_error:
        key = key[len(IGNORE_ERROR_PREFIX):].strip()

    if not key:
        raise MalformedLineError(number, text)

    return Line(
        type=LineType.PAIR,
        number=number,
        raw=text,
        key=key,
        value=value.strip(),
        ignore_error=ignore_error,
    )


class Lexer:
    """
    Tokenizer for line-oriented key/value text.

    Example:
        # network
        endpoint = localhost:3000
        -retry = 3
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename

    def tokenize(self) -> Iterator[Line]:
        """Generate a Line for every source line, stopping at the first malformed one."""
        # Only '\n' and '\r\n' end a line
        for index, text in enumerate(self.source.split("\n"), start=1):
            yield tokenize_line(text.removesuffix("\r"), index)

    def pairs(self) -> Iterator[Line]:
        """Generate only key/value lines, skipping comments and blanks."""
        for line in self.tokenize():
            if line.type is LineType.PAIR:
                yield line

    def __iter__(self) -> Iterator[Line]:
        """Allow iteration over lines."""
        return self.tokenize()


def tokenize(source: str, filename: str = "<string>") -> list[Line]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source, filename))

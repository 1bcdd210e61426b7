"""
Strict recursive-descent JSON decoder.

Parses a single JSON document into plain Python values. Objects become
dicts, arrays stay heterogeneous lists (never coerced into matrices), and
every number becomes a float. Any grammar violation raises ParseError
carrying the error kind and the exact position where it was detected.
"""

import functools
import logging
import numbers
import os
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import IO
from typing import Any

from strictjson._positions import LineIndex

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Position = int

# Number conversion hook - may return any numeric type (e.g. Decimal)
ParseFloatHook = Callable[[str], Any] | None

WHITESPACE = " \t\r\n"
DIGITS = "0123456789"
NONZERO_DIGITS = "123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"


def _max_depth_from_env() -> int:
    """Reads the process-wide nesting guard from STRICTJSON_MAX_DEPTH."""
    raw = os.environ.get("STRICTJSON_MAX_DEPTH", "256")
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(
            f"STRICTJSON_MAX_DEPTH must be a positive integer, got {raw!r}"
        ) from e
    if value < 1:
        raise ValueError(
            f"STRICTJSON_MAX_DEPTH must be a positive integer, got {raw!r}"
        )
    return value


# Nesting guard, overridable per process and per call
DEFAULT_MAX_DEPTH = _max_depth_from_env()

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "STRICTJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    def _profiled(func: Callable[..., Any]) -> Callable[..., Any]:
        """
        Times a cursor-taking parser method.

        Characters processed are the distance the cursor moved, so only
        successful calls are recorded.
        """
        name = func.__name__

        @functools.wraps(func)
        def wrapper(self: Any, idx: int, *args: Any) -> Any:
            start_time = time.perf_counter_ns()
            result = func(self, idx, *args)
            duration = time.perf_counter_ns() - start_time
            end = result if isinstance(result, int) else result[1]
            if name not in _hot_path_stats:
                _hot_path_stats[name] = HotPathStats(name)
            _hot_path_stats[name].record_call(duration, end - idx)
            return result

        return wrapper

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - methods are left undecorated
    def _profiled(func: Callable[..., Any]) -> Callable[..., Any]:
        return func

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class ValueKind(Enum):
    """The six variants a parsed JSON value can take."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"


def value_kind(value: Any) -> ValueKind:
    """
    Classifies a parsed value by its variant.

    bool is tested before numbers since it is an int subclass. Any
    numbers.Number counts as NUMBER so parse_float results classify too.
    """
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOL
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, dict):
        return ValueKind.OBJECT
    elif isinstance(value, list):
        return ValueKind.ARRAY
    elif isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    raise TypeError(f"{type(value).__name__} is not a JSON value type")


class ErrorKind(Enum):
    """Tags identifying which grammar rule a document violated."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_END = "unexpected_end"
    MISSING_OPEN_QUOTE = "missing_open_quote"
    UNTERMINATED_STRING = "unterminated_string"
    UNKNOWN_ESCAPE_SEQUENCE = "unknown_escape_sequence"
    INVALID_CONTROL_CHARACTER = "invalid_control_character"
    MISSING_LEADING_DIGIT = "missing_leading_digit"
    MISSING_FRACTION_DIGIT = "missing_fraction_digit"
    MISSING_EXPONENT_DIGIT = "missing_exponent_digit"
    MISSING_OPEN_BRACE = "missing_open_brace"
    MISSING_COLON = "missing_colon"
    MISSING_CLOSE_BRACE = "missing_close_brace"
    UNKNOWN_OBJECT_SEPARATOR = "unknown_object_separator"
    MISSING_OPEN_BRACKET = "missing_open_bracket"
    MISSING_CLOSE_BRACKET = "missing_close_bracket"
    UNKNOWN_ARRAY_SEPARATOR = "unknown_array_separator"
    TRUNCATED_KEYWORD = "truncated_keyword"
    MISSPELLED_KEYWORD = "misspelled_keyword"
    TRAILING_CONTENT = "trailing_content"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


class ParseError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Carries the error kind, the 0-based position (pos) and 1-based offset
    where the violation was detected, line/column numbers, and an excerpt
    of the surrounding text to help users locate the problem.
    """

    def __init__(
        self, kind: ErrorKind, msg: str, doc: str = "", pos: Position = 0
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos

        index = LineIndex(doc)
        self.lineno, self.colno = index.line_col(pos)
        self.excerpt = index.excerpt(pos)

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno} "
            f"(char {self.offset})"
        )

    @property
    def offset(self) -> int:
        """1-based character offset of the error."""
        return self.pos + 1

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.kind, self.msg, self.doc, self.pos)


class EscapeMode(Enum):
    """
    How backslash escapes inside strings are decoded.

    SINGLE_PASS reads escapes left to right so each one yields exactly one
    character. LEGACY applies whole-string replacements in a fixed order
    and reproduces its known mis-decoding of sequences such as \\\\n.
    """

    SINGLE_PASS = "single_pass"
    LEGACY = "legacy"


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    Centralized configuration for all parsing options: control character
    strictness, escape decoding, the nesting guard, and number conversion.
    """

    strict: bool = True
    escape_mode: EscapeMode = EscapeMode.SINGLE_PASS
    max_depth: int | None = DEFAULT_MAX_DEPTH
    parse_float: ParseFloatHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if not isinstance(self.escape_mode, EscapeMode):
            try:
                mode = EscapeMode(self.escape_mode)
            except ValueError as e:
                raise ValueError(
                    f"unknown escape_mode: {self.escape_mode!r}"
                ) from e
            object.__setattr__(self, "escape_mode", mode)
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise ValueError("max_depth must be a positive integer or None")
        if self.parse_float is not None and not callable(self.parse_float):
            raise TypeError("parse_float must be callable")


_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Order matters: \\ must be replaced last
_LEGACY_REPLACEMENTS = (
    ("\\t", "\t"),
    ("\\r", "\r"),
    ("\\n", "\n"),
    ("\\f", "\f"),
    ("\\b", "\b"),
    ("\\/", "/"),
    ('\\"', '"'),
)
_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def _decode_single_pass(content: str) -> str:
    """Decodes validated escapes in one left-to-right scan."""
    chunks = []
    pos = 0
    i = content.find("\\")
    while i != -1:
        chunks.append(content[pos:i])
        next_char = content[i + 1]
        if next_char == "u":
            chunks.append(chr(int(content[i + 2 : i + 6], 16)))
            pos = i + 6
        else:
            chunks.append(_SIMPLE_ESCAPES[next_char])
            pos = i + 2
        i = content.find("\\", pos)
    chunks.append(content[pos:])
    return "".join(chunks)


def _decode_legacy(content: str) -> str:
    """Decodes validated escapes with ordered whole-string replacement."""
    for escape, char in _LEGACY_REPLACEMENTS:
        content = content.replace(escape, char)
    content = _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), content)
    return content.replace("\\\\", "\\")


class Decoder:
    """
    Recursive-descent parser over one immutable JSON text.

    Every parse_* method takes the cursor of the first character of its
    production and returns (value, cursor just past it). The text is never
    modified; the only mutable state is the current nesting depth, which
    decode() resets.
    """

    def __init__(self, text: str, config: ParseConfig | None = None) -> None:
        self.text = text
        self.length = len(text)
        self.config = config if config is not None else ParseConfig()
        self.depth = 0
        # Opening bracket or brace of the innermost container entered
        self.last_open: Position = 0

    def _error(self, kind: ErrorKind, msg: str, pos: Position) -> ParseError:
        return ParseError(kind, msg, self.text, pos)

    def _peek(self, idx: Position) -> str:
        """Returns the character at idx, or NUL past the end."""
        return self.text[idx] if idx < self.length else "\0"

    def _describe(self, idx: Position) -> str:
        if idx >= self.length:
            return "end of input"
        return repr(self.text[idx])

    def _enter(self, idx: Position) -> None:
        """Counts one more open container; callers must decrement after."""
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            raise self._error(
                ErrorKind.MAX_DEPTH_EXCEEDED,
                f"Maximum nesting depth of {max_depth} exceeded",
                idx,
            )
        self.depth += 1
        self.last_open = idx

    @_profiled
    def skip_whitespace(self, idx: Position) -> Position:
        """Returns the first position at or after idx that is not whitespace."""
        text, length = self.text, self.length
        while idx < length and text[idx] in WHITESPACE:
            idx += 1
        return idx

    def parse_value(self, idx: Position) -> tuple[Any, Position]:
        """Parses any JSON value based on the character at idx."""
        if idx >= self.length:
            raise self._error(
                ErrorKind.UNEXPECTED_END,
                "Expecting value, found end of input",
                idx,
            )

        char = self.text[idx]
        if char == '"':
            return self.parse_string(idx)
        elif char == "-" or char in DIGITS:
            return self.parse_number(idx)
        elif char == "{":
            return self.parse_object(idx)
        elif char == "[":
            return self.parse_array(idx)
        elif char == "t":
            return self.parse_true(idx)
        elif char == "f":
            return self.parse_false(idx)
        elif char == "n":
            return self.parse_null(idx)
        else:
            raise self._error(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Unrecognized character {char!r}",
                idx,
            )

    def _find_closing_quote(self, idx: Position) -> Position:
        """Scans from the opening quote at idx to its unescaped partner."""
        text, length = self.text, self.length
        strict = self.config.strict
        pos = idx + 1
        while pos < length:
            char = text[pos]
            if char == '"':
                return pos
            elif char == "\\":
                # Skip escaped character
                pos += 2
                continue
            elif strict and char < " ":
                raise self._error(
                    ErrorKind.INVALID_CONTROL_CHARACTER,
                    f"Invalid control character {char!r} in string",
                    pos,
                )
            pos += 1

        raise self._error(
            ErrorKind.UNTERMINATED_STRING,
            "Unterminated string starting at",
            idx,
        )

    def _validate_escapes(self, content: str, base: Position) -> None:
        """Rejects any escape outside the JSON set; base is content's offset."""
        i = content.find("\\")
        while i != -1:
            next_char = content[i + 1]
            if next_char == "u":
                hex_digits = content[i + 2 : i + 6]
                if len(hex_digits) != 4 or any(
                    c not in HEX_DIGITS for c in hex_digits
                ):
                    raise self._error(
                        ErrorKind.UNKNOWN_ESCAPE_SEQUENCE,
                        f"Invalid unicode escape sequence: \\u{hex_digits}",
                        base + i,
                    )
                i = content.find("\\", i + 6)
            elif next_char in _SIMPLE_ESCAPES:
                i = content.find("\\", i + 2)
            else:
                raise self._error(
                    ErrorKind.UNKNOWN_ESCAPE_SEQUENCE,
                    f"Invalid escape sequence: \\{next_char}",
                    base + i,
                )

    @_profiled
    def parse_string(self, idx: Position) -> tuple[str, Position]:
        """Parses a quoted JSON string, decoding its escape sequences."""
        if self._peek(idx) != '"':
            raise self._error(
                ErrorKind.MISSING_OPEN_QUOTE,
                f"Expecting '\"' to start string, found {self._describe(idx)}",
                idx,
            )

        end = self._find_closing_quote(idx)
        content = self.text[idx + 1 : end]

        if "\\" in content:
            self._validate_escapes(content, idx + 1)
            if self.config.escape_mode is EscapeMode.LEGACY:
                content = _decode_legacy(content)
            else:
                content = _decode_single_pass(content)

        return content, end + 1

    def _skip_digits(self, idx: Position) -> Position:
        text, length = self.text, self.length
        while idx < length and text[idx] in DIGITS:
            idx += 1
        return idx

    @_profiled
    def parse_number(self, idx: Position) -> tuple[Any, Position]:
        """Scans the JSON number grammar and converts the match to a float."""
        text = self.text
        start = idx

        if self._peek(idx) == "-":
            idx += 1

        char = self._peek(idx)
        if char == "0":
            idx += 1
        elif char in NONZERO_DIGITS:
            idx = self._skip_digits(idx + 1)
        else:
            raise self._error(
                ErrorKind.MISSING_LEADING_DIGIT,
                f"Number {text[start:idx]!r} must start with a digit, "
                f"found {self._describe(idx)}",
                idx,
            )

        if self._peek(idx) == ".":
            idx += 1
            if self._peek(idx) not in DIGITS:
                raise self._error(
                    ErrorKind.MISSING_FRACTION_DIGIT,
                    f"No digit after decimal point in {text[start:idx]!r}",
                    idx,
                )
            idx = self._skip_digits(idx)

        if self._peek(idx) in "eE":
            idx += 1
            if self._peek(idx) in "+-":
                idx += 1
            if self._peek(idx) not in DIGITS:
                raise self._error(
                    ErrorKind.MISSING_EXPONENT_DIGIT,
                    f"No digit in exponent of {text[start:idx]!r}",
                    idx,
                )
            idx = self._skip_digits(idx)

        convert = self.config.parse_float or float
        return convert(text[start:idx]), idx

    @_profiled
    def parse_object(self, idx: Position) -> tuple[dict[str, Any], Position]:
        """Parses a JSON object; a repeated key keeps its last value."""
        if self._peek(idx) != "{":
            raise self._error(
                ErrorKind.MISSING_OPEN_BRACE,
                f"Expecting '{{' to start object, found {self._describe(idx)}",
                idx,
            )
        self._enter(idx)
        try:
            return self._parse_members(idx)
        finally:
            self.depth -= 1

    def _parse_members(
        self, start: Position
    ) -> tuple[dict[str, Any], Position]:
        obj: dict[str, Any] = {}

        idx = self.skip_whitespace(start + 1)
        if self._peek(idx) == "}":
            return obj, idx + 1

        while True:
            if idx >= self.length:
                raise self._error(
                    ErrorKind.MISSING_CLOSE_BRACE,
                    "Expecting '}' to close object starting at char "
                    f"{start + 1}",
                    idx,
                )

            key, idx = self.parse_string(idx)
            idx = self.skip_whitespace(idx)
            if self._peek(idx) != ":":
                raise self._error(
                    ErrorKind.MISSING_COLON,
                    f"Expecting ':' after key {key!r}, "
                    f"found {self._describe(idx)}",
                    idx,
                )

            idx = self.skip_whitespace(idx + 1)
            value, idx = self.parse_value(idx)
            obj[key] = value

            idx = self.skip_whitespace(idx)
            if idx >= self.length:
                raise self._error(
                    ErrorKind.MISSING_CLOSE_BRACE,
                    "Expecting '}' to close object starting at char "
                    f"{start + 1}",
                    idx,
                )

            char = self.text[idx]
            if char == ",":
                idx = self.skip_whitespace(idx + 1)
            elif char == "}":
                return obj, idx + 1
            else:
                raise self._error(
                    ErrorKind.UNKNOWN_OBJECT_SEPARATOR,
                    f"Expecting ',' or '}}' after object entry, found {char!r}",
                    idx,
                )

    @_profiled
    def parse_array(self, idx: Position) -> tuple[list[Any], Position]:
        """Parses a JSON array into a list, keeping element order and types."""
        if self._peek(idx) != "[":
            raise self._error(
                ErrorKind.MISSING_OPEN_BRACKET,
                f"Expecting '[' to start array, found {self._describe(idx)}",
                idx,
            )
        self._enter(idx)
        try:
            return self._parse_elements(idx)
        finally:
            self.depth -= 1

    def _parse_elements(self, start: Position) -> tuple[list[Any], Position]:
        values: list[Any] = []

        idx = self.skip_whitespace(start + 1)
        if self._peek(idx) == "]":
            return values, idx + 1

        while True:
            if idx >= self.length:
                raise self._error(
                    ErrorKind.MISSING_CLOSE_BRACKET,
                    "Expecting ']' to close array starting at char "
                    f"{start + 1}",
                    idx,
                )

            value, idx = self.parse_value(idx)
            values.append(value)

            idx = self.skip_whitespace(idx)
            if idx >= self.length:
                raise self._error(
                    ErrorKind.MISSING_CLOSE_BRACKET,
                    "Expecting ']' to close array starting at char "
                    f"{start + 1}",
                    idx,
                )

            char = self.text[idx]
            if char == ",":
                idx = self.skip_whitespace(idx + 1)
            elif char == "]":
                return values, idx + 1
            else:
                raise self._error(
                    ErrorKind.UNKNOWN_ARRAY_SEPARATOR,
                    f"Expecting ',' or ']' after array element, found {char!r}",
                    idx,
                )

    @_profiled
    def _parse_keyword(
        self, idx: Position, keyword: str, value: bool | None
    ) -> tuple[bool | None, Position]:
        end = idx + len(keyword)
        if end > self.length:
            raise self._error(
                ErrorKind.TRUNCATED_KEYWORD,
                f"Not enough data for {keyword!r} in {self.text[idx:]!r}",
                idx,
            )
        found = self.text[idx:end]
        if found != keyword:
            raise self._error(
                ErrorKind.MISSPELLED_KEYWORD,
                f"Expecting {keyword!r}, found {found!r}",
                idx,
            )
        return value, end

    def parse_true(self, idx: Position) -> tuple[bool | None, Position]:
        return self._parse_keyword(idx, "true", True)

    def parse_false(self, idx: Position) -> tuple[bool | None, Position]:
        return self._parse_keyword(idx, "false", False)

    def parse_null(self, idx: Position) -> tuple[bool | None, Position]:
        return self._parse_keyword(idx, "null", None)

    def decode(self) -> Any:
        """
        Parses the whole text as exactly one JSON value.

        Surrounding whitespace is allowed; anything else after the value,
        including a second value, is rejected.
        """
        self.depth = 0
        self.last_open = 0

        # Reject a leading UTF-8 BOM
        if self.text.startswith("\ufeff"):
            raise self._error(
                ErrorKind.UNEXPECTED_CHARACTER,
                "Unexpected UTF-8 BOM (decode using utf-8-sig)",
                0,
            )

        idx = self.skip_whitespace(0)
        try:
            value, idx = self.parse_value(idx)
        except RecursionError:
            # Nesting deeper than the interpreter stack allows
            raise self._error(
                ErrorKind.MAX_DEPTH_EXCEEDED,
                "Nesting depth exceeds the interpreter recursion limit",
                self.last_open,
            ) from None
        idx = self.skip_whitespace(idx)

        if idx != self.length:
            raise self._error(
                ErrorKind.TRAILING_CONTENT,
                "Extra data after top-level value: "
                f"{self.text[idx : idx + 20]!r}",
                idx,
            )

        return value


def parse(text: str, **kwargs: Any) -> Any:
    """
    Parses a JSON document into Python values with strict standards compliance.

    Validates input type and delegates to a Decoder with immutable
    configuration built from the keyword arguments (see ParseConfig).
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    try:
        return Decoder(text, config).decode()
    except ParseError as e:
        logger.debug(
            "JSON parse failed with %s at char %d: %s",
            e.kind.value,
            e.offset,
            e.msg,
        )
        raise


def load(fp: IO[str], **kwargs: Any) -> Any:
    """
    Parses a JSON document read in full from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Decoder",
    "ErrorKind",
    "EscapeMode",
    "HotPathStats",
    "JsonValue",
    "ParseConfig",
    "ParseError",
    "ValueKind",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "parse",
    "value_kind",
]

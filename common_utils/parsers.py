"""
Fail-fast parsers converting untyped strings into typed values.

Every parser takes the raw string and either returns the typed value or
raises :class:`~common_utils.errors.ParseError`; none of them fall back to a
sentinel such as ``0``, ``nan`` or ``{}``.

Typical use-cases: environment variables, query-string parameters, CLI
arguments.

    enabled  = parse_as_bool("true")
    attempts = parse_as_int("3")
    mode     = parse_as_enum("dev", ("dev", "pro"))

Parsers that need extra arguments have a binding helper
(:func:`csv_parser`, :func:`array_parser`, :func:`enum_parser`,
:func:`json_parser`) so they fit a ``{name: parser}`` registry.
"""

from __future__ import annotations

import enum
import json
import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError

from common_utils.errors import ParseError
from common_utils.validators import GUID, is_guid

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)

Parser = Callable[[str], T]

# Gate before int()/float(): they would accept "+1", " 1 ", "1_000", "4.", "nan" and
# non-ASCII digits, hence re.ASCII
_BOOL_TRUE_RE = re.compile(r"1|true", re.IGNORECASE | re.ASCII)
_BOOL_FALSE_RE = re.compile(r"0|false", re.IGNORECASE | re.ASCII)
_INT_RE = re.compile(r"-?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"-?\d+(\.\d+)?", re.ASCII)


def parse_as_bool(value: str) -> bool:
    """``1``/``true`` or ``0``/``false``, case-insensitive."""
    if _BOOL_TRUE_RE.fullmatch(value):
        return True
    if _BOOL_FALSE_RE.fullmatch(value):
        return False
    raise ParseError(value, "boolean")


def parse_as_int(value: str) -> int:
    """Base-10 integer without sign prefix ``+`` or grouping separators."""
    if not _INT_RE.fullmatch(value):
        raise ParseError(value, "integer")
    try:
        return int(value)
    except ValueError as exc:
        # beyond sys.get_int_max_str_digits()
        raise ParseError(value, "integer") from exc


def parse_as_float(value: str) -> float:
    """Decimal number with a dot separator; ``4.`` is rejected."""
    if not _FLOAT_RE.fullmatch(value):
        raise ParseError(value, "float")
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ParseError(value, "float")
    return parsed


def parse_as_date(value: str) -> datetime:
    """ISO-8601 or RFC 2822 date/time as an aware ``datetime``.

    Inputs without an offset are taken as UTC.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            raise ParseError(value, "date") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_as_json(value: str, shape: Any = None) -> Any:
    """Decode JSON text, validated against *shape* (any pydantic-compatible type) when given."""
    if shape is None:
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise ParseError(value, "JSON", f'Invalid JSON: "{value}" ({exc.msg})') from exc
    try:
        return TypeAdapter(shape).validate_json(value)
    except ValidationError as exc:
        raise ParseError(value, "JSON", f'Invalid JSON: "{value}" ({exc.error_count()} validation errors)') from exc


def parse_as_csv(value: str, delimiter: str = ",") -> list[str]:
    return [token.strip() for token in value.split(delimiter)]


def parse_as_array(value: str, item_parser: Parser[T], delimiter: str = ",") -> list[T]:
    """Split *value* like :func:`parse_as_csv` and run *item_parser* on every token.

    The item parser's error is not wrapped.
    """
    return [item_parser(token) for token in parse_as_csv(value, delimiter)]


def parse_as_string(value: str) -> str:
    return value


def parse_as_enum(value: str, allowed: Sequence[str] | type[E]) -> Any:
    """Return *value* if it belongs to *allowed*.

    *allowed* is either a sequence of literals or an ``enum.Enum`` subclass;
    for the latter the member whose value equals *value* is returned.
    """
    if isinstance(allowed, type) and issubclass(allowed, enum.Enum):
        try:
            return allowed(value)
        except ValueError:
            options = ", ".join(str(member.value) for member in allowed)
            raise ParseError(value, "enum", f'Invalid value "{value}", allowed: {options}') from None
    if isinstance(allowed, str):
        raise TypeError("allowed must be a sequence of literals or an Enum class, not a str")
    if value in allowed:
        return value
    raise ParseError(value, "enum", f'Invalid value "{value}", allowed: {", ".join(allowed)}')


def parse_as_guid(value: str) -> GUID:
    if not is_guid(value):
        raise ParseError(value, "GUID")
    return GUID(value)


# ── Binding helpers ────────────────────────────────────────────────────


def csv_parser(delimiter: str = ",") -> Parser[list[str]]:
    def _parse(value: str) -> list[str]:
        return parse_as_csv(value, delimiter)

    return _parse


def array_parser(item_parser: Parser[T], delimiter: str = ",") -> Parser[list[T]]:
    def _parse(value: str) -> list[T]:
        return parse_as_array(value, item_parser, delimiter)

    return _parse


def enum_parser(allowed: Sequence[str] | type[E]) -> Parser[Any]:
    def _parse(value: str) -> Any:
        return parse_as_enum(value, allowed)

    return _parse


def json_parser(shape: Any = None) -> Parser[Any]:
    def _parse(value: str) -> Any:
        return parse_as_json(value, shape)

    return _parse

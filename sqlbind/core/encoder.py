"""Conversion of Python values into SQL literal text.

``encode_value`` is the single place where the literal form of a value is
chosen. It returns the literal and whether the value is text-like, which the
JSON path rendering uses to decide if the literal must become a JSON string.

Literal selection order:

1. ``None``, ``bool``, ``int``, ``float``, ``Decimal``, ``str``
2. binary buffers, durations, timestamps, dates, times, UUIDs, raw JSON
3. enum members without a primitive mix-in, by their ``value``
4. values exposing ``__index__`` or ``__float__``
5. everything else through ``str()``
"""

import datetime
import math
import operator
from decimal import Decimal
from typing import Any, Final
from uuid import UUID

import msgspec

from sqlbind._serialization import encode_json
from sqlbind.config import JSON_PATH_LITERAL, SQL_LITERAL, SQL_STANDARD_LITERAL, LiteralConfig
from sqlbind.exceptions import SerializationError, UnsupportedDurationRangeError
from sqlbind.types import RawJSON
from sqlbind.utils.type_guards import (
    is_byte_sequence,
    is_float_like,
    is_integer_like,
    is_plain_enum,
    is_raw_json,
)

__all__ = (
    "MAX_DURATION_SECONDS",
    "encode_value",
    "escape_text",
    "null_if_empty",
    "render_literal",
    "to_json_literal",
    "to_json_path",
    "to_sql",
)

MAX_DURATION_SECONDS: Final = 24 * 60 * 60
TIMESTAMP_FORMAT: Final = "%m-%d %H:%M:%S.%f %z"

_NON_FINITE_NAMES: Final = {"nan": "NaN", "inf": "Infinity", "-inf": "-Infinity"}


def escape_text(text: str, config: LiteralConfig) -> str:
    """Escape and quote text.

    Backslashes are doubled first, then single quotes (and the configured quote
    character) are backslash-escaped. The result is wrapped in the quote
    character and prefixed with ``E`` when extended strings are enabled.
    """
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    quote = config.quote
    if quote and quote != "'":
        escaped = escaped.replace(quote, "\\" + quote)
    prefix = "E" if config.extended_strings and quote else ""
    return f"{prefix}{quote}{escaped}{quote}"


def _encode_text(text: str, config: LiteralConfig) -> tuple[str, bool]:
    text = text.strip()
    if not text:
        return config.null, False
    return escape_text(text, config), True


def _encode_integer(value: int) -> str:
    try:
        return int.__repr__(value)
    except ValueError:
        # past sys.get_int_max_str_digits(); Decimal keeps every digit
        return str(Decimal(value))


def _encode_float(value: float, config: LiteralConfig) -> tuple[str, bool]:
    if math.isfinite(value):
        return float.__repr__(value), False
    return f"{config.quote}{_NON_FINITE_NAMES[float.__repr__(value)]}{config.quote}", True


def _encode_decimal(value: Decimal, config: LiteralConfig) -> tuple[str, bool]:
    if value.is_finite():
        return str(value), False
    if value.is_nan():
        return f"{config.quote}NaN{config.quote}", True
    name = "-Infinity" if value.is_signed() else "Infinity"
    return f"{config.quote}{name}{config.quote}", True


def _encode_bytes(value: bytes, config: LiteralConfig) -> tuple[str, bool]:
    if config.json_path:
        return "\\\\x" + value.hex(), True
    prefix = "E" if config.extended_strings else ""
    return f"{prefix}{config.quote}\\\\x{value.hex()}{config.quote}", True


def _encode_duration(value: datetime.timedelta, config: LiteralConfig) -> tuple[str, bool]:
    total = int(value.total_seconds())
    if value < datetime.timedelta(0) or total > MAX_DURATION_SECONDS:
        raise UnsupportedDurationRangeError(value)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{config.quote}{hours:02d}:{minutes:02d}:{seconds:02d}{config.quote}", True


def _encode_timestamp(value: datetime.datetime, config: LiteralConfig) -> tuple[str, bool]:
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    # %Y is not zero-padded below year 1000 on every platform
    return f"{config.quote}{value.year:04d}-{value.strftime(TIMESTAMP_FORMAT)}{config.quote}", True


def encode_value(value: Any, config: LiteralConfig = SQL_LITERAL) -> tuple[str, bool]:
    """Render a value as literal text.

    Args:
        value: The value to render.
        config: Quoting and escaping rules.

    Raises:
        UnsupportedDurationRangeError: For durations outside 0..24 hours.

    Returns:
        Tuple of (literal text, whether the value is text-like).
    """
    if value is None:
        return config.null, False
    if isinstance(value, bool):
        return config.boolean(value), False
    if isinstance(value, int):
        return _encode_integer(value), False
    if isinstance(value, float):
        return _encode_float(value, config)
    if isinstance(value, Decimal):
        return _encode_decimal(value, config)
    if isinstance(value, str):
        return _encode_text(str.__str__(value), config)
    if is_byte_sequence(value):
        return _encode_bytes(bytes(value), config)
    if isinstance(value, datetime.timedelta):
        return _encode_duration(value, config)
    if isinstance(value, datetime.datetime):
        return _encode_timestamp(value, config)
    if isinstance(value, (datetime.date, datetime.time)):
        return f"{config.quote}{value.isoformat()}{config.quote}", True
    if isinstance(value, UUID):
        return f"{config.quote}{value}{config.quote}", True
    if is_raw_json(value):
        return _encode_text(value.payload, config)
    if is_plain_enum(value):
        return encode_value(value.value, config)
    if is_integer_like(value):
        return _encode_integer(operator.index(value)), False
    if is_float_like(value):
        return _encode_float(float(value), config)
    return _encode_text(str(value), config)


def render_literal(value: Any, config: LiteralConfig = SQL_LITERAL) -> str:
    """Render a value as the final literal for the given configuration.

    In JSON path mode text-like values become JSON strings, except raw JSON
    payloads which are already JSON values.
    """
    literal, is_text = encode_value(value, config)
    if not config.json_path or not is_text or is_raw_json(value):
        return literal
    return '"' + literal.replace('"', '\\"') + '"'


def to_sql(value: Any, *, extended_strings: bool = True) -> str:
    """Render a value as an inline SQL literal."""
    return render_literal(value, SQL_LITERAL if extended_strings else SQL_STANDARD_LITERAL)


def to_json_path(value: Any) -> str:
    """Render a value for use inside a JSON path expression."""
    return render_literal(value, JSON_PATH_LITERAL)


def to_json_literal(value: Any, config: LiteralConfig = SQL_LITERAL) -> str:
    """Serialize a structured value to JSON and render it as a text literal.

    Raises:
        SerializationError: If the value cannot be encoded as JSON.
    """
    if value is None:
        return config.null
    if not is_raw_json(value):
        try:
            value = RawJSON(encode_json(value))
        except (TypeError, msgspec.EncodeError) as exc:
            msg = f"Can't serialize {type(value).__name__} to JSON: {exc}"
            raise SerializationError(msg, value) from exc
    return render_literal(value, config)


def null_if_empty(value: Any) -> Any:
    """Turn a zero or empty value into ``None`` so it binds as ``NULL``.

    Zero integers, whitespace-only strings, and empty byte sequences or raw
    JSON payloads become ``None``. Everything else, including ``False`` and
    ``0.0``, is returned unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return None if value == 0 else value
    if isinstance(value, str):
        return None if not value.strip() else value
    if is_byte_sequence(value) or is_raw_json(value):
        return None if len(value) == 0 else value
    return value

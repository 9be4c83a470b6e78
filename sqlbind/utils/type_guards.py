"""Type guard functions used by the value encoder.

These checks keep the literal-selection order explicit instead of relying on
``isinstance`` chains scattered through the encoder.
"""

from enum import Enum
from typing import Any, Union

from typing_extensions import TypeGuard

from sqlbind.protocols import FloatLike, IntegerLike
from sqlbind.types import RawJSON

__all__ = (
    "is_byte_sequence",
    "is_float_like",
    "is_integer_like",
    "is_plain_enum",
    "is_raw_json",
)


def is_byte_sequence(value: Any) -> "TypeGuard[Union[bytes, bytearray, memoryview]]":
    """Check if a value is a binary buffer rendered as a hex literal."""
    return isinstance(value, (bytes, bytearray, memoryview))


def is_raw_json(value: Any) -> "TypeGuard[RawJSON]":
    """Check if a value is a pre-serialized JSON payload."""
    return isinstance(value, RawJSON)


def is_integer_like(value: Any) -> "TypeGuard[IntegerLike]":
    """Check if a value converts losslessly to ``int``.

    ``bool`` is excluded: booleans render as keywords, not digits.
    """
    return not isinstance(value, bool) and isinstance(value, IntegerLike)


def is_float_like(value: Any) -> "TypeGuard[FloatLike]":
    """Check if a value converts to ``float``.

    Text, binary and complex values are excluded even when a subclass adds ``__float__``.
    """
    return not isinstance(value, (str, bytes, bytearray, complex)) and isinstance(value, FloatLike)


def is_plain_enum(value: Any) -> "TypeGuard[Enum]":
    """Check if a value is an enum member without a primitive mix-in.

    ``IntEnum`` and ``str``-mixed enums are already handled as their primitive.
    """
    return isinstance(value, Enum) and not isinstance(value, (int, float, str))

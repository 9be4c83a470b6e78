"""JSON encoding and decoding backed by ``msgspec``."""

from typing import Any, Literal, Union, overload

import msgspec

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to a compact JSON string or bytes.

    Raises:
        TypeError: If the data holds a value msgspec cannot encode.
        msgspec.EncodeError: If msgspec rejects the data (e.g. circular references).
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    """Decode JSON text into Python objects.

    Raises:
        msgspec.DecodeError: If the data is not valid JSON.
    """
    return _decoder.decode(data)

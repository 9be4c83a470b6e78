"""Core value types used throughout sqlbind."""

from typing import Union

__all__ = ("Occurrence", "RawJSON")


class Occurrence:
    """Immutable placeholder occurrence found while scanning a template."""

    __slots__ = ("name", "position")

    def __init__(self, name: str, position: int) -> None:
        self.name = name
        self.position = position

    @property
    def end(self) -> int:
        """Offset just past the placeholder text."""
        return self.position + len(self.name)

    def __eq__(self, other: object) -> bool:
        """Equality comparison for Occurrence objects."""
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.position == other.position

    def __hash__(self) -> int:
        return hash((self.name, self.position))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, position={self.position!r})"


class RawJSON:
    """Pre-serialized JSON payload.

    Bound values of this type are treated as an existing JSON document: the
    payload is escaped as text but never wrapped in an additional pair of JSON
    quotes when rendered for a JSON path.
    """

    __slots__ = ("payload",)

    def __init__(self, payload: Union[str, bytes, bytearray, memoryview]) -> None:
        if isinstance(payload, (bytes, bytearray, memoryview)):
            payload = bytes(payload).decode("utf-8")
        self.payload = payload

    def __len__(self) -> int:
        return len(self.payload)

    def __str__(self) -> str:
        return self.payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.payload == other.payload

    def __hash__(self) -> int:
        return hash(self.payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.payload!r})"

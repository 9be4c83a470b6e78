"""Runtime-checkable protocols for values that stand in for numeric primitives.

Caller-defined aliases of built-in numbers do not have to subclass ``int`` or
``float``; implementing the matching conversion hook is enough for the encoder
to render them like the primitive they wrap.
"""

from typing import Protocol, runtime_checkable

__all__ = ("FloatLike", "IntegerLike")


@runtime_checkable
class IntegerLike(Protocol):
    """Objects that losslessly convert to ``int`` through ``__index__``."""

    def __index__(self) -> int: ...


@runtime_checkable
class FloatLike(Protocol):
    """Objects that convert to ``float`` through ``__float__``."""

    def __float__(self) -> float: ...

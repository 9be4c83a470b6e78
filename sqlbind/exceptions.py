from typing import Any, Optional

__all__ = (
    "BindAfterFinalizeError",
    "BindError",
    "DuplicateBindError",
    "EmptyPlaceholderMarkerError",
    "EmptyVariableNameError",
    "EncodeError",
    "MissingBindValueError",
    "SQLBindError",
    "SerializationError",
    "TemplateCacheKeyConflict",
    "TemplateError",
    "UnsupportedDurationRangeError",
)


class SQLBindError(Exception):
    """Base exception class from which all sqlbind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


# -- Template Errors --
class TemplateError(SQLBindError):
    """Base class for errors found while scanning a template."""

    template: Optional[str]

    def __init__(self, message: str, template: Optional[str] = None) -> None:
        """Initialize with optional template context."""
        detail_message = message
        if template:
            detail_message = f"{message}\nSQL: {template}"
        super().__init__(detail=detail_message)
        self.template = template


class EmptyPlaceholderMarkerError(TemplateError):
    """Raised when a ``:`` marker is not followed by a placeholder name."""

    position: int

    def __init__(self, position: int, template: Optional[str] = None) -> None:
        super().__init__(f"Found ':' without variable at position {position}", template)
        self.position = position


# -- Bind Errors --
class BindError(SQLBindError):
    """Base class for errors raised while binding or rendering values."""

    name: Optional[str]

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        super().__init__(detail=message)
        self.name = name


class EmptyVariableNameError(BindError):
    """Raised when binding a value under an empty placeholder name."""

    def __init__(self) -> None:
        super().__init__("Empty variable name")


class DuplicateBindError(BindError):
    """Raised when the same placeholder is bound twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Already bound: {name}", name)


class BindAfterFinalizeError(BindError):
    """Raised when binding into a binder that already rendered its SQL."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Bind after render: {name}", name)


class MissingBindValueError(BindError):
    """Raised at render time when a placeholder has no bound value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Bind value not found for: {name}", name)


# -- Encode Errors --
class EncodeError(SQLBindError):
    """Base class for values that cannot be turned into a SQL literal."""

    value: Any

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(detail=message)
        self.value = value


class UnsupportedDurationRangeError(EncodeError):
    """Raised for durations that do not fit the ``HH:MM:SS`` literal form."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Can't bind duration outside 0..24h, value: {value}", value)


class SerializationError(EncodeError):
    """Encoding of a structured value to JSON failed."""


class TemplateCacheKeyConflict(BaseException):  # noqa: N818
    """The same cache key was used for two different templates.

    This signals a bug in the caller's key selection, not a data problem.
    It derives from :class:`BaseException` so ordinary ``except Exception``
    handlers do not absorb it and the failure unwinds to the top.
    """

    key: str

    def __init__(self, key: str, cached_length: int, template_length: int) -> None:
        super().__init__(
            f"Same key for different templates: {key!r} "
            f"(cached length {cached_length}, new length {template_length})"
        )
        self.key = key
        self.cached_length = cached_length
        self.template_length = template_length

"""Binding values into a SQL template.

``SQLBinder`` collects rendered literals for one template and produces the
final SQL once. It is not thread-safe: use one binder per call sequence. The
parser behind it may be shared through a :class:`~sqlbind.core.cache.TemplateCache`.
"""

from collections.abc import Mapping
from typing import Any, Optional

from sqlbind.config import SQL_LITERAL, LiteralConfig
from sqlbind.core.cache import TemplateCache, get_default_cache
from sqlbind.core.encoder import render_literal, to_json_literal
from sqlbind.core.scanner import TemplateParser, normalize_placeholder_name
from sqlbind.exceptions import BindAfterFinalizeError, DuplicateBindError, EmptyVariableNameError
from sqlbind.utils.logging import get_logger

__all__ = ("SQLBinder", "bind", "bind_one")

logger = get_logger("sqlbind.core.binder")


class SQLBinder:
    """Accumulates bound values for one render of one template.

    Args:
        template: SQL template with ``:name`` placeholders.
        key: Cache key identifying the template text. Empty disables caching.
        cache: Template cache to use for non-empty keys. Defaults to the process-wide cache.
        literal_config: Default rendering rules for bound values.
    """

    __slots__ = ("_finalized", "_literal_config", "_parser", "_sql", "_values")

    def __init__(
        self,
        template: str,
        key: str = "",
        *,
        cache: Optional[TemplateCache] = None,
        literal_config: LiteralConfig = SQL_LITERAL,
    ) -> None:
        if cache is None:
            cache = get_default_cache()
        self._parser = cache.get_parser(key, template)
        self._literal_config = literal_config
        self._values: dict[str, str] = {}
        self._sql: Optional[str] = None
        self._finalized = False

    @property
    def parser(self) -> TemplateParser:
        return self._parser

    @property
    def template(self) -> str:
        return self._parser.template

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def bound_names(self) -> list[str]:
        """Normalized names bound so far, in bind order."""
        return list(self._values)

    def bind(
        self,
        name: str,
        value: Any,
        *,
        as_json: bool = False,
        json_path: bool = False,
        extended_strings: Optional[bool] = None,
    ) -> "SQLBinder":
        """Bind a value to a placeholder.

        Args:
            name: Placeholder name, with or without the leading ``:``.
            value: Value to render as a literal.
            as_json: Serialize the value to JSON and bind it as a text literal.
            json_path: Render the value for use inside a JSON path expression.
            extended_strings: Override the ``E`` prefix for escaped text.

        Raises:
            EmptyVariableNameError: If ``name`` is empty.
            BindAfterFinalizeError: If the SQL was already rendered.
            DuplicateBindError: If the placeholder is already bound.

        Returns:
            The binder itself.
        """
        if not name:
            raise EmptyVariableNameError
        placeholder = normalize_placeholder_name(name)
        if self._finalized:
            raise BindAfterFinalizeError(placeholder)
        if placeholder in self._values:
            raise DuplicateBindError(placeholder)

        config = self._literal_config
        if json_path or extended_strings is not None:
            config = config.replace(extended_strings=extended_strings, json_path=json_path or None)
        if as_json:
            literal = to_json_literal(value, config)
        else:
            literal = render_literal(value, config)

        self._values[placeholder] = literal
        return self

    def bind_all(self, values: Mapping[str, Any], **directives: Any) -> "SQLBinder":
        """Bind every entry of ``values``.

        Stops at the first failure. Entries bound before it stay bound.
        """
        for name, value in values.items():
            self.bind(name, value, **directives)
        return self

    def render(self) -> str:
        """Produce the SQL, substituting bound literals on the first call.

        Later calls return the same string without substituting again.

        Raises:
            EmptyPlaceholderMarkerError: If the template has a ``:`` without a name.
            MissingBindValueError: If a placeholder has no bound value.

        Returns:
            The rendered SQL.
        """
        if self._sql is None:
            self._sql = self._parser.calculate(self._values)
            self._finalized = True
            logger.debug(
                "Rendered template with %d placeholder(s) and %d bound value(s)",
                len(self._parser.occurrences),
                len(self._values),
                extra={"extra_fields": {"placeholders": len(self._parser.occurrences), "bound": len(self._values)}},
            )
        return self._sql

    sql = render

    def clear(self) -> "SQLBinder":
        """Drop bound values and the rendered SQL, keeping the scanned template."""
        self._values = {}
        self._sql = None
        self._finalized = False
        return self

    def has_placeholder(self, name: str) -> bool:
        """Check for a placeholder, scanning the template if needed."""
        return self._parser.scan().has_placeholder(name)

    def placeholders(self) -> list[str]:
        """Placeholder names in template order, repeats included.

        Scans the template if needed.
        """
        return self._parser.scan().placeholders()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.template!r}, bound={self.bound_names!r}, finalized={self._finalized!r})"


def bind_one(
    template: str,
    name: str,
    value: Any,
    key: str = "",
    *,
    cache: Optional[TemplateCache] = None,
    **directives: Any,
) -> str:
    """Bind a single value and render the SQL in one step."""
    return SQLBinder(template, key, cache=cache).bind(name, value, **directives).render()


def bind(
    template: str,
    values: Mapping[str, Any],
    key: str = "",
    *,
    cache: Optional[TemplateCache] = None,
    **directives: Any,
) -> str:
    """Bind a mapping of values and render the SQL in one step."""
    return SQLBinder(template, key, cache=cache).bind_all(values, **directives).render()

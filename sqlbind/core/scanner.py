"""Template scanning for ``:name`` placeholders.

The scanner makes one left-to-right pass over the template. Block comments,
line comments, single-quoted strings and the ``::`` cast operator are matched
first and skipped, so placeholder-like text inside them is never reported.
"""

import re
from collections.abc import Mapping
from typing import Final, Optional

from mypy_extensions import mypyc_attr

from sqlbind.core.substitution import substitute
from sqlbind.exceptions import EmptyPlaceholderMarkerError
from sqlbind.types import Occurrence
from sqlbind.utils.logging import get_logger

__all__ = ("PLACEHOLDER_PREFIX", "TemplateParser", "normalize_placeholder_name", "scan_template")

logger = get_logger("sqlbind.core.scanner")

PLACEHOLDER_PREFIX: Final = ":"

# Alternatives share no first character, so the order below is also the precedence
# between modes when several could start at the same offset.
_TEMPLATE_TOKEN_REGEX: Final = re.compile(
    r"""
    (?P<block_comment>/\*[\s\S]*?(?:\*/|\Z)) |      # /* ... */, or to end of input
    (?P<line_comment>--[^\n]*) |                    # -- ... to end of line
    (?P<squote>'(?:[^']|'')*'?) |                   # '...' with '' as an escaped quote
    (?P<pg_cast>::) |                               # type cast, never a placeholder
    (?P<placeholder>:(?P<name>[A-Za-z0-9_]*))       # :name (empty name is an error)
    """,
    re.VERBOSE,
)


def scan_template(template: str) -> list[Occurrence]:
    """Find placeholder occurrences in template order.

    Args:
        template: SQL template text.

    Raises:
        EmptyPlaceholderMarkerError: If a ``:`` is not followed by a placeholder name.

    Returns:
        Occurrences sorted by position.
    """
    occurrences: list[Occurrence] = []
    for match in _TEMPLATE_TOKEN_REGEX.finditer(template):
        if match.group("placeholder") is None:
            continue
        if not match.group("name"):
            raise EmptyPlaceholderMarkerError(match.start(), template)
        occurrences.append(Occurrence(match.group("placeholder"), match.start()))
    return occurrences


def normalize_placeholder_name(name: str) -> str:
    """Prefix ``name`` with the placeholder marker unless it already has one."""
    if name.startswith(PLACEHOLDER_PREFIX):
        return name
    return PLACEHOLDER_PREFIX + name


@mypyc_attr(allow_interpreted_subclasses=True)
class TemplateParser:
    """Owns a SQL template and the placeholder occurrences found in it.

    A parser is scanned at most once. After a successful scan it is immutable
    and may be shared by any number of binders.
    """

    __slots__ = ("_occurrence_map", "_occurrences", "_scanned", "_template")

    def __init__(self, template: str) -> None:
        self._template = template
        self._occurrences: tuple[Occurrence, ...] = ()
        self._occurrence_map: dict[str, Occurrence] = {}
        self._scanned = False

    @property
    def template(self) -> str:
        return self._template

    @property
    def is_scanned(self) -> bool:
        return self._scanned

    @property
    def occurrences(self) -> tuple[Occurrence, ...]:
        return self._occurrences

    def scan(self) -> "TemplateParser":
        """Scan the template for placeholders.

        Scanning again after a successful scan is a no-op. A failed scan keeps
        nothing, so the parser stays unscanned.

        Raises:
            EmptyPlaceholderMarkerError: If a ``:`` is not followed by a placeholder name.

        Returns:
            The parser itself.
        """
        if self._scanned:
            return self

        try:
            occurrences = scan_template(self._template)
        except EmptyPlaceholderMarkerError as exc:
            logger.debug("Template scan failed at position %d", exc.position)
            raise

        occurrence_map: dict[str, Occurrence] = {}
        for occurrence in occurrences:
            occurrence_map.setdefault(occurrence.name, occurrence)

        self._occurrences = tuple(occurrences)
        self._occurrence_map = occurrence_map
        self._scanned = True
        logger.debug("Scanned template: %d placeholder(s)", len(occurrences))
        return self

    def placeholders(self) -> list[str]:
        """Placeholder names in template order, repeats included."""
        return [occurrence.name for occurrence in self._occurrences]

    def get_occurrence(self, name: str) -> Optional[Occurrence]:
        """First occurrence of an exact (case-sensitive) placeholder name."""
        return self._occurrence_map.get(normalize_placeholder_name(name))

    def has_placeholder(self, name: str) -> bool:
        """Check whether the template contains a placeholder.

        The argument is lower-cased before the lookup while scanned names keep
        their case, so placeholders spelled with upper-case letters are not
        reported here. Use :meth:`get_occurrence` for an exact match.
        """
        if not self._occurrence_map:
            return False
        return normalize_placeholder_name(name.lower()) in self._occurrence_map

    def calculate(self, values: Mapping[str, str]) -> str:
        """Scan if needed, then substitute already rendered literals.

        Args:
            values: Mapping from placeholder name (with leading ``:``) to literal text.

        Returns:
            The rendered SQL.
        """
        self.scan()
        return substitute(self._template, self._occurrences, values)

    def __repr__(self) -> str:
        state = "scanned" if self._scanned else "unscanned"
        return f"{type(self).__name__}({self._template!r}, {state})"

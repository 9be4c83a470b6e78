"""Rebuild SQL text from a template, its occurrences and rendered literals."""

from collections.abc import Mapping, Sequence

from sqlbind.exceptions import MissingBindValueError
from sqlbind.types import Occurrence

__all__ = ("substitute",)


def substitute(template: str, occurrences: Sequence[Occurrence], values: Mapping[str, str]) -> str:
    """Splice literals into the template at each placeholder occurrence.

    Args:
        template: The original SQL template.
        occurrences: Placeholder occurrences in increasing position order.
        values: Mapping from placeholder name (with leading ``:``) to literal text.

    Raises:
        MissingBindValueError: If an occurrence has no entry in ``values``.

    Returns:
        The rendered SQL. The template itself when there are no occurrences.
    """
    if not occurrences:
        return template

    parts: list[str] = []
    cursor = 0
    for occurrence in occurrences:
        literal = values.get(occurrence.name)
        if literal is None:
            raise MissingBindValueError(occurrence.name)
        parts.append(template[cursor : occurrence.position])
        parts.append(literal)
        cursor = occurrence.end
    parts.append(template[cursor:])
    return "".join(parts)

"""Literal rendering configuration."""

from typing import Final, Optional

__all__ = ("JSON_PATH_LITERAL", "SQL_LITERAL", "SQL_STANDARD_LITERAL", "LiteralConfig")


class LiteralConfig:
    """Declarative configuration for how bound values are rendered as literals."""

    __slots__ = ("extended_strings", "json_path", "quote")

    def __init__(self, quote: str = "'", extended_strings: bool = True, json_path: bool = False) -> None:
        """Initialize literal configuration.

        Args:
            quote: Quote character wrapped around text-like literals. Empty for JSON path rendering.
            extended_strings: Prefix escaped text with ``E`` so backslash escapes are recognized.
            json_path: Render for a JSON path expression: lower-case keywords and text wrapped in double quotes.
        """
        self.quote = quote
        self.extended_strings = extended_strings and not json_path
        self.json_path = json_path

    @property
    def null(self) -> str:
        return "null" if self.json_path else "NULL"

    def boolean(self, value: bool) -> str:
        if self.json_path:
            return "true" if value else "false"
        return "TRUE" if value else "FALSE"

    def replace(
        self,
        quote: Optional[str] = None,
        extended_strings: Optional[bool] = None,
        json_path: Optional[bool] = None,
    ) -> "LiteralConfig":
        """Return a copy with the given fields replaced.

        Switching on ``json_path`` without an explicit ``quote`` drops the quote character.
        """
        if json_path and quote is None:
            quote = ""
        return LiteralConfig(
            quote=self.quote if quote is None else quote,
            extended_strings=self.extended_strings if extended_strings is None else extended_strings,
            json_path=self.json_path if json_path is None else json_path,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            self.quote == other.quote
            and self.extended_strings == other.extended_strings
            and self.json_path == other.json_path
        )

    def __hash__(self) -> int:
        return hash((self.quote, self.extended_strings, self.json_path))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(quote={self.quote!r}, "
            f"extended_strings={self.extended_strings!r}, json_path={self.json_path!r})"
        )


SQL_LITERAL: Final = LiteralConfig()
SQL_STANDARD_LITERAL: Final = LiteralConfig(extended_strings=False)
JSON_PATH_LITERAL: Final = LiteralConfig(quote="", extended_strings=False, json_path=True)

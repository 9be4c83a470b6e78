from typing import IO, Any

import msgspec
import rich_click as click
from rich.console import Console
from rich.markup import escape

from sqlbind.__metadata__ import __version__
from sqlbind._serialization import decode_json
from sqlbind.core.binder import SQLBinder
from sqlbind.core.encoder import null_if_empty
from sqlbind.exceptions import SQLBindError
from sqlbind.utils.logging import LOG_FORMATS, configure_logging, get_logger

__all__ = ("get_sqlbind_group", "main")

logger = get_logger("sqlbind.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _split_assignment(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        msg = f"Expected NAME=VALUE, got {raw!r}"
        raise click.BadParameter(msg)
    return name, value


def _parse_params(raw_params: "tuple[str, ...]") -> list[tuple[str, str]]:
    return [_split_assignment(raw) for raw in raw_params]


def _parse_json_params(raw_params: "tuple[str, ...]") -> list[tuple[str, Any]]:
    values: list[tuple[str, Any]] = []
    for raw in raw_params:
        name, text = _split_assignment(raw)
        try:
            values.append((name, decode_json(text)))
        except msgspec.DecodeError as e:
            msg = f"Invalid JSON for {name!r}: {e}"
            raise click.BadParameter(msg) from e
    return values


def get_sqlbind_group() -> "click.Group":
    """Get the sqlbind CLI group."""

    @click.group(name="sqlbind")
    @click.version_option(__version__, prog_name="sqlbind")
    @click.option(
        "--log-level",
        help="Logging level for sqlbind loggers.",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default="WARNING",
        show_default=True,
    )
    @click.option(
        "--log-format",
        help="Log line format: plain text or one JSON object per line.",
        type=click.Choice(LOG_FORMATS),
        default="simple",
        show_default=True,
    )
    def sqlbind_group(log_level: str, log_format: str) -> None:
        """Render SQL templates with named placeholders."""
        configure_logging(level=log_level, format_style=log_format)

    @sqlbind_group.command(name="render", help="Bind values into a template and print the SQL.")
    @click.argument("template", type=click.File("r"))
    @click.option(
        "--param", "-p", "params", multiple=True, metavar="NAME=VALUE", help="Bind VALUE as text to :NAME."
    )
    @click.option(
        "--json-param",
        "-j",
        "json_params",
        multiple=True,
        metavar="NAME=JSON",
        help="Decode JSON and bind it with its native type. Objects and arrays are bound as JSON text.",
    )
    @click.option("--null-if-empty", "nullify", is_flag=True, help="Bind zero and empty values as NULL.")
    @click.option("--no-extended-strings", is_flag=True, help="Do not prefix escaped text with E.")
    @click.pass_context
    def render_command(
        ctx: "click.Context",
        template: "IO[str]",
        params: "tuple[str, ...]",
        json_params: "tuple[str, ...]",
        nullify: bool,
        no_extended_strings: bool,
    ) -> None:
        console = Console(stderr=True)
        text_values = _parse_params(params)
        json_values = _parse_json_params(json_params)
        extended_strings = False if no_extended_strings else None

        binder = SQLBinder(template.read())
        try:
            # every assignment is bound, so a repeated name is a duplicate bind
            for name, value in [*text_values, *json_values]:
                if nullify:
                    value = null_if_empty(value)
                binder.bind(
                    name,
                    value,
                    as_json=isinstance(value, (dict, list)),
                    extended_strings=extended_strings,
                )
            sql = binder.render()
        except SQLBindError as e:
            console.print(f"[red]Error rendering template: {escape(str(e))}[/]", markup=True, highlight=False)
            ctx.exit(1)
        logger.debug("Rendered template from %s", getattr(template, "name", "<stream>"))
        click.echo(sql)

    @sqlbind_group.command(name="placeholders", help="List the placeholders of a template in order.")
    @click.argument("template", type=click.File("r"))
    @click.pass_context
    def placeholders_command(ctx: "click.Context", template: "IO[str]") -> None:
        console = Console(stderr=True)
        binder = SQLBinder(template.read())
        try:
            names = binder.placeholders()
        except SQLBindError as e:
            console.print(f"[red]Error scanning template: {escape(str(e))}[/]", markup=True, highlight=False)
            ctx.exit(1)
        for name in names:
            click.echo(name)

    return sqlbind_group


def main() -> None:
    """Run the sqlbind CLI."""
    get_sqlbind_group()()

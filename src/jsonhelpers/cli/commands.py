"""CLI commands for jsonhelpers.

Re-encodes JSON files through the serialization helpers.
- ``pretty`` / ``compact`` read a JSON file and write it back indented or
  compact, to stdout or to ``--output``.
- ``defaults`` / ``set-defaults`` show and persist the serializer defaults
  stored in the user config file.
- ``version`` prints the package version.

Design:
- JSON goes to stdout through ``typer.echo`` so Rich never interprets brackets
  as markup; status and errors go through the Rich consoles.
- Exit codes are defined as an Enum, matching the other commands.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from jsonhelpers.core.facade import (
    parse_from_file,
    serialize_to_file,
    serialize_to_pretty_file,
    serialize_to_pretty_string,
    serialize_to_string,
)
from jsonhelpers.errors import JsonHelpersError
from jsonhelpers.models.options import SerializerOptions
from jsonhelpers.utils import config
from jsonhelpers.utils.debug import debug, setup_logger

app = typer.Typer(
    name="jsonhelpers",
    help="Re-encode JSON files in compact or pretty form.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


SOURCE = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="JSON file to read",
    ),
]

OUTPUT = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Write to this file instead of stdout"),
]

INDENT = Annotated[
    Optional[int],
    typer.Option("--indent", "-i", min=1, help="Spaces per nesting level"),
]

NEWLINE = Annotated[
    Optional[str],
    typer.Option(
        "--newline",
        help="Line terminator for pretty output: lf, crlf or cr",
    ),
]

_NEWLINES = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


def _newline_value(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    try:
        return _NEWLINES[name.lower()]
    except KeyError:
        raise typer.BadParameter(
            f"Invalid newline. Must be one of: {', '.join(_NEWLINES)}"
        ) from None


def _load(source: Path) -> Any:
    try:
        return parse_from_file(source)
    except JsonHelpersError as exc:
        err_console.print(f"[red]Error reading {source}:[/red] {exc}")
        raise typer.Exit(ExitCode.ERROR) from exc


def _options(**overrides: Any) -> SerializerOptions:
    try:
        return config.load_default_options(**overrides)
    except JsonHelpersError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(ExitCode.ERROR) from exc


def _emit(document: Any, output: Optional[Path], options: SerializerOptions) -> None:
    if output is None:
        if options.indented:
            typer.echo(serialize_to_pretty_string(document, options))
        else:
            typer.echo(serialize_to_string(document, options))
        return
    if options.indented:
        serialize_to_pretty_file(document, output, options)
    else:
        serialize_to_file(document, output, options)
    err_console.print(f"[green]Wrote[/green] {output}")


@app.callback()
def callback() -> None:
    """Re-encode JSON files in compact or pretty form."""
    setup_logger()


@app.command()
def pretty(
    source: SOURCE,
    output: OUTPUT = None,
    indent: INDENT = None,
    newline: NEWLINE = None,
) -> None:
    """Rewrite a JSON file with indentation."""
    # stdout is written in text mode, which already translates "\n".
    default_newline = "\n" if output is None else None
    options = _options(
        indent=indent, newline=_newline_value(newline) or default_newline
    )
    debug(f"pretty {source} -> {output or 'stdout'}")
    _emit(_load(source), output, options.pretty())


@app.command()
def compact(source: SOURCE, output: OUTPUT = None) -> None:
    """Rewrite a JSON file without insignificant whitespace."""
    options = _options()
    debug(f"compact {source} -> {output or 'stdout'}")
    _emit(_load(source), output, options)


@app.command()
def defaults() -> None:
    """Show the serializer defaults resolved from config and environment."""
    options = _options()
    table = Table(title="Serializer defaults")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name in config.PERSISTED_FIELDS:
        table.add_row(name, repr(getattr(options, name)))
    console.print(table)
    path = config.config_path()
    console.print(f"Config file: {path if path else '(none)'}")


@app.command("set-defaults")
def set_defaults(
    indent: INDENT = None,
    newline: NEWLINE = None,
) -> None:
    """Persist serializer defaults to the user config file."""
    options = _options(
        indent=indent, newline=_newline_value(newline)
    )
    path = config.save_default_options(options)
    console.print(f"[green]Saved defaults to[/green] {path}")


@app.command()
def version() -> None:
    """Show the version of jsonhelpers."""
    from jsonhelpers.__about__ import __version__

    console.print(f"jsonhelpers version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()

"""Command-line interface for jsonhelpers.

- app: The Typer application, registered as the ``jsonhelpers`` console script.
- console: Rich Console used for status output.
"""

from rich.traceback import install

from jsonhelpers.cli.commands import app, console

# Install rich traceback handler for all CLI commands
install(show_locals=False)

__all__ = ["app", "console"]

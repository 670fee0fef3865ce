"""Allow ``python -m jsonhelpers.cli``."""

from jsonhelpers.cli.commands import app

app()

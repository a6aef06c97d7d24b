"""Command-line interface for mediaparser.

- app: The Typer application object used by the ``mediaparser`` console script.
- All output goes through Rich; JSON output is written straight to stdout.
"""

from mediaparser.cli.commands import app

__all__ = ["app"]

"""CLI commands for mediaparser.

This module implements the user-facing commands:
- classify: classify media names given as arguments (or one per line on stdin)
  and print the verdicts as a rich table or as JSON.
- version: print the installed version.

Options that are not passed explicitly fall back to environment variables and
the config file through :func:`mediaparser.utils.config.resolve_setting`.
"""

import json
import sys
from enum import Enum
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.traceback import install as install_traceback

from mediaparser.cli.renderer import (
    Classification,
    classification_to_dict,
    render_classifications,
)
from mediaparser.core.classifier import media_details_for_name, media_type_for_name
from mediaparser.models.core import MediaType
from mediaparser.utils.config import resolve_setting
from mediaparser.utils.debug import enable_debug, warn

install_traceback(show_locals=True)

app = typer.Typer(
    name="mediaparser",
    help="Classify media file names and extract title, season, year and more.",
    add_completion=False,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    UNRESOLVED = 2


NAMES = Annotated[
    Optional[List[str]],
    typer.Argument(
        help="Media names to classify. Reads one name per line from stdin "
        "when omitted.",
        show_default=False,
    ),
]

JSON_OUTPUT = Annotated[
    Optional[bool],
    typer.Option(
        "--json/--no-json",
        help="Output results in JSON format [config: output.json]",
        show_default=False,
    ),
]

FAIL_ON_UNRESOLVED = Annotated[
    Optional[bool],
    typer.Option(
        "--fail-on-unresolved/--allow-unresolved",
        help="Exit with code 2 if any name is unknown or ambiguous "
        "[config: classify.fail_on_unresolved]",
        show_default=False,
    ),
]

NO_COLOR = Annotated[
    bool,
    typer.Option(
        "--no-color",
        help="Disable colored output",
    ),
]


@app.callback()
def callback(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log classification decisions to stderr. "
        "Can also be set with the MEDIAPARSER_DEBUG environment variable.",
    ),
) -> None:
    """Classify media file names without consulting any external service."""
    if debug:
        enable_debug()


def _read_names(names: Optional[List[str]]) -> List[str]:
    if names:
        return list(names)
    if sys.stdin.isatty():
        return []
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


@app.command()
def classify(
    names: NAMES = None,
    json_output: JSON_OUTPUT = None,
    fail_on_unresolved: FAIL_ON_UNRESOLVED = None,
    no_color: NO_COLOR = False,
) -> None:
    """Classify media names and show the extracted details."""
    console = Console(no_color=no_color)
    use_json = resolve_setting("output.json", default=False, cli_value=json_output)
    strict = resolve_setting(
        "classify.fail_on_unresolved", default=False, cli_value=fail_on_unresolved
    )

    name_list = _read_names(names)
    if not name_list:
        console.print("[red]Error: No media names given.[/red]")
        raise typer.Exit(ExitCode.ERROR)

    results: List[Classification] = []
    for name in name_list:
        media_type = media_type_for_name(name)
        if media_type == MediaType.AMBIGUOUS:
            warn(f"{name!r} matches more than one media type")
        results.append((name, media_type, media_details_for_name(name)))

    if use_json:
        payload = [classification_to_dict(*result) for result in results]
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    else:
        render_classifications(results, console=console)

    unresolved = {MediaType.UNKNOWN, MediaType.AMBIGUOUS}
    if strict and any(media_type in unresolved for _, media_type, _ in results):
        raise typer.Exit(ExitCode.UNRESOLVED)


@app.command()
def version() -> None:
    """Show the version of mediaparser."""
    from mediaparser.__about__ import __version__

    Console().print(f"mediaparser version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()

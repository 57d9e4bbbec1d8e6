"""Entry point de la CLI: `color-namer --hex ... | --rgb ...`."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from adapters.clipboard import PyperclipClipboard
from adapters.color_api import TheColorAPIResolver
from cli.ui_components import ConsoleSink, configure_logging, print_error
from core import __version__
from core.config import load_settings
from core.domain.errors import ColorNamerError
from core.services.naming_pipeline import NameRequest, run_naming

app = typer.Typer(
    add_completion=False,
    help=(
        "Color Nomenclature tool (i.e. color namer) that uses The Color API "
        "(https://www.thecolorapi.com/) to report the name of a color."
    ),
)

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"color-namer {__version__}", markup=False, highlight=False)
        raise typer.Exit()


@app.command()
def name(
    hex_value: Optional[str] = typer.Option(
        None,
        "--hex",
        metavar="HEX",
        help="Color in hexadecimal form, e.g. '#ff8000' or 'f80'.",
    ),
    rgb_value: Optional[str] = typer.Option(
        None,
        "--rgb",
        metavar="RGB",
        help="Color in rgb() form, e.g. 'rgb(255,128,0)'.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs on stderr.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Report the name of a color and copy it to the clipboard."""

    configure_logging(verbose=verbose, console=_err_console)

    request = NameRequest(hex=hex_value, rgb=rgb_value)
    try:
        settings = load_settings()
        sink = ConsoleSink(_console, PyperclipClipboard())
        run_naming(request, resolver=TheColorAPIResolver(settings), sink=sink)
    except ColorNamerError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc


def run() -> None:
    # Los nombres de color pueden traer acentos; cp1252 en Windows no los imprime.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()

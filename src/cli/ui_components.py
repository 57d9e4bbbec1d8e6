"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El sink de resultados (terminal + portapapeles) queda testeable con una
  `Console` que escribe en memoria.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from core.domain.errors import ColorNamerError
from core.domain.models import ColorQueryResult
from core.interfaces.output import ClipboardWriter, ResultSink

CLIPBOARD_HINT = "(This has been copied to the clipboard for you)"


class ConsoleSink(ResultSink):
    """Imprime `Name: <name>` y copia el nombre al portapapeles.

    No hay modo degradado: si el portapapeles falla, `ClipboardError` sube
    y la CLI termina con error aunque el nombre ya se haya impreso.
    """

    def __init__(self, console: Console, clipboard: ClipboardWriter) -> None:
        self._console = console
        self._clipboard = clipboard

    def emit(self, result: ColorQueryResult) -> None:
        # Los nombres vienen de la red: nada de markup ni resaltado.
        self._console.print(f"Name: {result.name}", markup=False, highlight=False)
        self._clipboard.copy(result.name)
        self._console.print(CLIPBOARD_HINT, style="dim", markup=False, highlight=False)


def print_error(console: Console, exc: ColorNamerError) -> None:
    """Mensaje único de error para el usuario."""

    message = Text("Error: ", style="bold red")
    message.append(str(exc))
    console.print(message)


def configure_logging(*, verbose: bool, console: Console) -> None:
    """Logging a stderr vía Rich; DEBUG solo con `--verbose`."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=False)],
        force=True,
    )

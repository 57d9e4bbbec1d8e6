"""Portapapeles del sistema (pyperclip)."""

from __future__ import annotations

import logging

import pyperclip

from core.domain.errors import ClipboardError
from core.interfaces.output import ClipboardWriter

logger = logging.getLogger(__name__)


class PyperclipClipboard(ClipboardWriter):
    """Escribe en el portapapeles del SO.

    Sin fallback: si pyperclip no encuentra mecanismo (xclip, xsel,
    wl-clipboard...) el error sube tal cual como `ClipboardError`.
    """

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Could not access the system clipboard: {exc}") from exc
        logger.debug("Copied %d character(s) to the clipboard", len(text))

"""Contratos de salida: portapapeles y sink de resultados."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ColorQueryResult


@runtime_checkable
class ClipboardWriter(Protocol):
    def copy(self, text: str) -> None:
        """Sobrescribe el portapapeles; lanza `ClipboardError` si no hay acceso."""

        ...


@runtime_checkable
class ResultSink(Protocol):
    """Destino final del nombre resuelto (terminal + portapapeles)."""

    def emit(self, result: ColorQueryResult) -> None:
        ...

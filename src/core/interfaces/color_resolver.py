"""Contrato del servicio de nombres de color.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Un resolver falso en tests demuestra que no hubo actividad de red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ColorQueryResult, RGBValue


@runtime_checkable
class ColorResolver(Protocol):
    """Traduce un `RGBValue` a un nombre legible.

    Reglas de diseño:
    - `resolve` es síncrono: una única llamada bloqueante.
    - Los fallos se expresan con `NetworkError` / `ResponseFormatError`.
    """

    def resolve(self, color: RGBValue) -> ColorQueryResult:
        ...

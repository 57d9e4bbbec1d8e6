"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los rangos (0..255) se validan en el borde, una sola vez.
- Los modelos son inmutables (`frozen`): se crean, se consumen y se tiran.

Nota:
- Estos modelos describen *qué* es un color, no *cómo* se obtiene su nombre.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RGBValue(BaseModel):
    """Color normalizado: tres bytes (rojo, verde, azul)."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(..., ge=0, le=255, description="Componente rojo (0..255).")
    green: int = Field(..., ge=0, le=255, description="Componente verde (0..255).")
    blue: int = Field(..., ge=0, le=255, description="Componente azul (0..255).")

    def as_query(self) -> str:
        """Valor del parámetro `rgb` de la API: `r,g,b` en decimal."""

        return f"{self.red},{self.green},{self.blue}"

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class ColorQueryResult(BaseModel):
    """Resultado de la consulta al servicio de nombres.

    `exact_match` se conserva aunque la CLI todavía no lo muestre.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Nombre legible del color (p.ej. 'Burnt Orange').",
    )
    exact_match: bool = Field(
        default=False,
        description="True si el servicio encontró una coincidencia exacta.",
    )

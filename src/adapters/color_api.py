"""Resolver de nombres: The Color API (https://www.thecolorapi.com/).

Contrato consumido:
- `GET /id?rgb=<r>,<g>,<b>`
- Respuesta JSON; solo se leen `name.value` y `name.exact_match_name`.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import NetworkError, ResponseFormatError
from core.domain.models import ColorQueryResult, RGBValue
from core.interfaces.color_resolver import ColorResolver

logger = logging.getLogger(__name__)


class ColorApiName(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: str = Field(..., description="Nombre legible del color.")
    exact_match_name: bool = Field(..., description="Coincidencia exacta en el catálogo.")


class ColorApiResponse(BaseModel):
    """Subset de la respuesta de `/id` (el resto de campos se ignora)."""

    model_config = ConfigDict(extra="ignore")

    name: ColorApiName


class TheColorAPIResolver(ColorResolver):
    """Consulta el nombre de un color en The Color API."""

    _endpoint = "/id"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def build_url(self, color: RGBValue) -> str:
        # Las comas van literales en la query, igual que las espera la API.
        base = self._settings.api_base_url.rstrip("/")
        return f"{base}{self._endpoint}?rgb={color.as_query()}"

    def resolve(self, color: RGBValue) -> ColorQueryResult:
        url = self.build_url(color)
        logger.debug("GET %s", url)

        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with build_client(self._settings) as client:
                    response = client.get(url)
        except httpx.RequestError as exc:
            raise NetworkError(f"Could not reach the color naming service: {exc}") from exc

        logger.debug("HTTP %s from %s", response.status_code, response.url)
        if not response.is_success:
            raise ResponseFormatError(
                f"Color naming service answered HTTP {response.status_code}"
            )

        try:
            payload = ColorApiResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseFormatError(
                f"Unexpected response from the color naming service ({exc.error_count()} problem(s))"
            ) from exc

        return ColorQueryResult(
            name=payload.name.value,
            exact_match=payload.name.exact_match_name,
        )

"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las peticiones.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults de la aplicación.

    Por qué síncrono:
    - Hay una sola petición por ejecución; no hay nada que solapar.
    - `http_timeout_seconds=None` deja la llamada bloqueante sin límite.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )

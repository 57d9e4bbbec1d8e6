"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el resolver HTTP lea URL/timeout/User-Agent de forma consistente.

Sin variables definidas, el comportamiento es el de siempre: thecolorapi.com
y sin timeout.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__
from core.domain.errors import ConfigError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias).

    Objetivo: poder fijar URL/timeout de la API una sola vez para todas las
    invocaciones, sin depender del directorio desde el que se lanza la CLI.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "color-namer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "color-namer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "color-namer"
    return Path.home() / ".config" / "color-namer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="COLOR_NAMER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://www.thecolorapi.com",
        min_length=8,
        description="Base URL del servicio de nombres (The Color API).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = bloquea sin límite.",
    )
    user_agent: str = Field(
        default=f"color-namer/{__version__}",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )


def load_settings() -> AppSettings:
    """Carga `AppSettings` traduciendo errores de validación a `ConfigError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"COLOR_NAMER_{'_'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration ({problems})") from exc

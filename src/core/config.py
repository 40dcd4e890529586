"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI
  ni el handler Lambda.
- Permite que adaptadores (HTTP) y el ensamblador de respuestas lean config
  de forma consistente.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Nota:
    - `cache_ttl` acepta también `CACHE_TTL` sin prefijo, que es el nombre
      que usa el despliegue Lambda.
    """

    model_config = SettingsConfigDict(
        env_prefix="RMK_REQID_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cache_ttl: int = Field(
        default=3600,
        ge=0,
        validation_alias=AliasChoices("CACHE_TTL", "RMK_REQID_CACHE_TTL"),
        description="max-age (segundos) para la cabecera Cache-Control en respuestas OK.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request hacia la instancia RMK (segundos).",
    )
    user_agent: str = Field(
        default="rmk-reqid/0.1",
        min_length=1,
        description="User-Agent para las peticiones salientes.",
    )
    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level

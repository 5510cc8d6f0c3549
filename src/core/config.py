"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el adaptador de consola y la CLI lean la config de forma
  consistente.

Sólo lectura: no se escribe ningún fichero de configuración.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DateFormat


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="INPUT_HELPER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    prompt_suffix: str = Field(
        default=": ",
        description="Text appended to every prompt.",
    )
    diagnostic_style: str = Field(
        default="yellow",
        description="Rich style used for diagnostics (e.g. 'yellow', 'bold red', 'none').",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    date_pattern: str = Field(
        default="yyyy-MM-dd",
        min_length=1,
        description="Default parse pattern for `ask date`.",
    )
    date_display: str = Field(
        default="YYYY-MM-DD",
        description="Default format hint shown by `ask date`.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def date_format(self) -> DateFormat:
        """Default `DateFormat` for date prompts."""

        return DateFormat(parse_pattern=self.date_pattern, display_pattern=self.date_display)

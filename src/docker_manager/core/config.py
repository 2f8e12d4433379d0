"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Adaptadores y servicios leen la misma configuración.

Precedencia del endpoint: `DOCKER_MANAGER_ENDPOINT` > flag `-e` > default.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOCKER_ENDPOINT = "http://localhost:2375"

_SETTINGS_CONFIG = SettingsConfigDict(
    env_prefix="DOCKER_MANAGER_",
    extra="ignore",
    case_sensitive=False,
    env_file=".env",
    env_file_encoding="utf-8",
)


class _EndpointSettings(BaseSettings):
    model_config = _SETTINGS_CONFIG

    endpoint: str | None = None


def endpoint_from_environment() -> str | None:
    """Endpoint definido en entorno/.env, si lo hay (gana sobre el flag `-e`).

    Solo lee `endpoint`: un valor inválido en otra variable no debe impedir
    que los flags lo sobrescriban.
    """

    return _EndpointSettings().endpoint


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = _SETTINGS_CONFIG

    endpoint: str = Field(
        default=DEFAULT_DOCKER_ENDPOINT,
        min_length=1,
        description="Endpoint HTTP del daemon de Docker.",
    )

    image: str = Field(default="ubuntu", min_length=1)
    image_tag: str = Field(default="20.04", min_length=1)
    image_arch: str = Field(
        default="x86-64",
        min_length=1,
        description="Plataforma enviada al hacer pull.",
    )
    container_name: str = Field(default="ubuntu2004", min_length=1)
    container_cmd: list[str] = Field(
        default_factory=lambda: ["sleep", "infinity"],
        description="Comando que mantiene vivo el contenedor.",
    )

    ready_timeout_seconds: float = Field(
        default=180.0,
        gt=0,
        description="Tiempo máximo esperando a que el contenedor esté `running`.",
    )
    ready_poll_interval_seconds: float = Field(default=1.0, gt=0)

    exec_interval_seconds: float = Field(
        default=0.8,
        gt=0,
        description="Cada cuánto se refresca la salida del comando en pantalla.",
    )
    exec_cmd: list[str] = Field(
        default_factory=lambda: ["/bin/sh", "-c", "top -b -n 1 | head -4 | tail -2"],
        min_length=1,
    )
    quit_keyword: str = Field(default="e", min_length=1)

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(default="docker-manager/0.1", min_length=1)

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console", description="console | json")

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    @property
    def image_reference(self) -> str:
        return f"{self.image}:{self.image_tag}"

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic aquí:
- Los nombres del wire (`Cmd`, `Image`, `State`...) quedan como alias y el
  código Python usa snake_case.
- La validación de respuestas convierte JSON inesperado en un error claro.

Nota:
- Son registros de vida corta: existen solo durante la llamada que los crea.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        """Serializa con los nombres de campo que espera el daemon."""

        return self.model_dump_json(by_alias=True)


class CreateContainerBody(_WireModel):
    """Body de `POST /containers/create`."""

    cmd: list[str] = Field(
        default_factory=list,
        alias="Cmd",
        description="Comando a ejecutar al arrancar el contenedor.",
    )
    image: str = Field(
        ...,
        min_length=1,
        alias="Image",
        description="Imagen más tag (`ubuntu:20.04`).",
    )


class CreateContainerResponseBody(_WireModel):
    """Respuesta 201 de `POST /containers/create`."""

    id: str = Field(..., min_length=1, alias="Id", description="ID del contenedor creado.")
    warnings: list[str] = Field(
        default_factory=list,
        alias="Warnings",
        description="Avisos emitidos por el daemon al crear.",
    )

    @field_validator("warnings", mode="before")
    @classmethod
    def _null_warnings(cls, value: object) -> object:
        # El daemon devuelve `null` cuando no hay avisos.
        return [] if value is None else value


class ContainerState(_WireModel):
    status: str = Field(
        default="",
        alias="Status",
        description="Estado actual (created, running, paused, exited...).",
    )
    running: bool = Field(default=False, alias="Running")


class CheckContainerStatusBody(_WireModel):
    """Subconjunto de `GET /containers/{id}/json` que nos interesa."""

    state: ContainerState = Field(..., alias="State")

    @property
    def is_running(self) -> bool:
        return self.state.status == "running"


class GenerateExecInstanceBody(_WireModel):
    """Body de `POST /containers/{id}/exec`."""

    attach_stdin: bool = Field(default=False, alias="AttachStdin")
    attach_stdout: bool = Field(default=True, alias="AttachStdout")
    attach_stderr: bool = Field(default=True, alias="AttachStderr")
    tty: bool = Field(
        default=True,
        alias="Tty",
        description="Con TTY el daemon devuelve stdout/stderr sin multiplexar.",
    )
    cmd: list[str] = Field(..., min_length=1, alias="Cmd")


class CreateExecResponseBody(_WireModel):
    """Respuesta 201 de `POST /containers/{id}/exec`."""

    id: str = Field(..., min_length=1, alias="Id", description="ID de la exec instance.")


class StartExecInstanceBody(_WireModel):
    """Body de `POST /exec/{id}/start`."""

    detach: bool = Field(default=False, alias="Detach")
    tty: bool = Field(default=True, alias="Tty")

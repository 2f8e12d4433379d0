"""Contrato de un cliente del daemon de Docker.

Una operación por endpoint. Las implementaciones traducen códigos de estado a
los errores de `core.errors`; los servicios del Core dependen solo de esto.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Docker(Protocol):
    async def check_if_image_already_exists(self, image: str, tag: str) -> bool:
        """True si la imagen está en el registro local, False si no."""

        ...

    async def pull_image_from_registry(self, image: str, tag: str, arch: str) -> None:
        """Descarga `image:tag` para la plataforma `arch`."""

        ...

    async def create_container(
        self,
        name: str,
        image: str,
        tag: str,
        cmd: Sequence[str],
    ) -> str:
        """Crea un contenedor y devuelve su ID."""

        ...

    async def run_container(self, container_id: str) -> None:
        ...

    async def check_if_container_is_ready(self, container_id: str) -> bool:
        """True solo si el estado del contenedor es `running`."""

        ...

    async def generate_exec_instance(self, container_id: str, cmd: Sequence[str]) -> str:
        """Crea una exec instance y devuelve su ID."""

        ...

    async def start_exec_instance(self, exec_id: str) -> str:
        """Ejecuta la exec instance de forma síncrona y devuelve stdout+stderr."""

        ...

    async def stop_container(self, container_id: str) -> bool:
        """True si se paró, False si ya estaba parado."""

        ...

    async def remove_container(self, container_id: str) -> None:
        ...

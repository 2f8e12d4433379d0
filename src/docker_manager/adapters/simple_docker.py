"""Cliente del daemon de Docker sobre la API HTTP.

Cada método:
1. construye la URL a partir de una plantilla fija,
2. serializa el body JSON si hace falta,
3. invoca el verbo HTTP,
4. clasifica el código de estado en {ok, error conocido, `DaemonError`}.

No hay reintentos ni backoff: cualquier error se propaga al llamante.
"""

from __future__ import annotations

from typing import Mapping, Sequence, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, ValidationError

from docker_manager.core.domain.models import (
    CheckContainerStatusBody,
    CreateContainerBody,
    CreateContainerResponseBody,
    CreateExecResponseBody,
    GenerateExecInstanceBody,
    StartExecInstanceBody,
)
from docker_manager.core.errors import (
    ContainerAlreadyExistsError,
    ContainerNotFoundError,
    ContainerRunningError,
    ContainerStoppedError,
    DaemonError,
    ExecInstanceNotFoundError,
    ImageNotFoundError,
    MarshallingError,
)
from docker_manager.core.interfaces.docker import Docker
from docker_manager.core.interfaces.http import HttpClient, HttpResponse

_JSON_HEADERS = {"Content-Type": "application/json"}

M = TypeVar("M", bound=BaseModel)


def _decode(model: type[M], response: HttpResponse, action: str) -> M:
    try:
        return model.model_validate_json(response.body)
    except ValidationError as exc:
        raise MarshallingError(f"json unmarshalling issue when {action} - {exc}") from exc


def _unexpected(response: HttpResponse) -> DaemonError:
    return DaemonError(status_code=response.status_code)


class SimpleDocker(Docker):
    """Cliente `Docker` que habla HTTP con el daemon a través de un `HttpClient`."""

    def __init__(self, endpoint: str, http_client: HttpClient) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.http_client = http_client

    def _url(self, path: str, query: Mapping[str, str] | None = None) -> str:
        url = f"{self.endpoint}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    async def check_if_image_already_exists(self, image: str, tag: str) -> bool:
        response = await self.http_client.get(self._url(f"/images/{image}:{tag}/json"))

        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise _unexpected(response)

    async def pull_image_from_registry(self, image: str, tag: str, arch: str) -> None:
        url = self._url("/images/create", {"fromImage": image, "tag": tag, "platform": arch})
        response = await self.http_client.post(url)

        if response.status_code == 200:
            return
        if response.status_code == 404:
            raise ImageNotFoundError(status_code=404)
        raise _unexpected(response)

    async def create_container(
        self,
        name: str,
        image: str,
        tag: str,
        cmd: Sequence[str],
    ) -> str:
        body = CreateContainerBody(cmd=list(cmd), image=f"{image}:{tag}")
        response = await self.http_client.post(
            self._url("/containers/create", {"name": name}),
            _JSON_HEADERS,
            body.to_json(),
        )

        if response.status_code == 201:
            return _decode(CreateContainerResponseBody, response, "creating container").id
        if response.status_code == 404:
            raise ImageNotFoundError(status_code=404)
        if response.status_code == 409:
            raise ContainerAlreadyExistsError(status_code=409)
        raise _unexpected(response)

    async def run_container(self, container_id: str) -> None:
        response = await self.http_client.post(self._url(f"/containers/{container_id}/start"))

        # 304: ya estaba arrancado
        if response.status_code in (204, 304):
            return
        if response.status_code == 404:
            raise ContainerNotFoundError(status_code=404)
        raise _unexpected(response)

    async def check_if_container_is_ready(self, container_id: str) -> bool:
        response = await self.http_client.get(self._url(f"/containers/{container_id}/json"))

        if response.status_code == 200:
            status = _decode(CheckContainerStatusBody, response, "checking if container ready")
            return status.is_running
        if response.status_code == 404:
            raise ContainerNotFoundError(status_code=404)
        raise _unexpected(response)

    async def generate_exec_instance(self, container_id: str, cmd: Sequence[str]) -> str:
        body = GenerateExecInstanceBody(cmd=list(cmd))
        response = await self.http_client.post(
            self._url(f"/containers/{container_id}/exec"),
            _JSON_HEADERS,
            body.to_json(),
        )

        if response.status_code == 201:
            return _decode(CreateExecResponseBody, response, "generating exec instance").id
        if response.status_code == 404:
            raise ContainerNotFoundError(status_code=404)
        if response.status_code == 409:
            raise ContainerStoppedError(status_code=409)
        raise _unexpected(response)

    async def start_exec_instance(self, exec_id: str) -> str:
        response = await self.http_client.post(
            self._url(f"/exec/{exec_id}/start"),
            _JSON_HEADERS,
            StartExecInstanceBody().to_json(),
        )

        if response.status_code == 200:
            return response.text
        if response.status_code == 404:
            raise ExecInstanceNotFoundError(status_code=404)
        if response.status_code == 409:
            raise ContainerStoppedError(status_code=409)
        raise _unexpected(response)

    async def stop_container(self, container_id: str) -> bool:
        response = await self.http_client.post(self._url(f"/containers/{container_id}/stop"))

        if response.status_code == 204:
            return True
        if response.status_code == 304:
            return False
        if response.status_code == 404:
            raise ContainerNotFoundError(status_code=404)
        raise _unexpected(response)

    async def remove_container(self, container_id: str) -> None:
        response = await self.http_client.delete(self._url(f"/containers/{container_id}"))

        if response.status_code == 204:
            return
        if response.status_code == 404:
            raise ContainerNotFoundError(status_code=404)
        if response.status_code == 409:
            raise ContainerRunningError(status_code=409)
        raise _unexpected(response)

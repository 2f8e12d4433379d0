"""Errores del dominio.

Cada endpoint del daemon traduce sus códigos de estado a un conjunto pequeño
de errores con nombre. Cualquier otro código colapsa en `DaemonError`.

Jerarquía:
- `DockerManagerError`
  - `HttpClientError`: fallo de transporte (conexión, timeout...).
  - `MarshallingError`: JSON que no encaja con el modelo esperado.
  - `DaemonError`: error genérico del daemon.
    - `ImageNotFoundError`, `ContainerAlreadyExistsError`,
      `ContainerNotFoundError`, `ContainerRunningError`,
      `ContainerStoppedError`, `ExecInstanceNotFoundError`.
  - `ReadinessTimeoutError`: el contenedor nunca llegó a `running`.
"""

from __future__ import annotations


class DockerManagerError(Exception):
    """Base exception for docker-manager."""


class HttpClientError(DockerManagerError):
    """The HTTP transport failed before a status code was received."""

    def __init__(self, method: str, url: str, cause: BaseException | str) -> None:
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(
            f"there was an issue with HTTP client when performing {method} on {url} - {cause}"
        )


class MarshallingError(DockerManagerError):
    """A request or response body could not be (de)serialized."""


class DaemonError(DockerManagerError):
    """Unknown error reported by the daemon."""

    default_message = "there was an unknown error at docker daemon side"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or self.default_message)


class ImageNotFoundError(DaemonError):
    default_message = "the image selected does not exist"


class ContainerAlreadyExistsError(DaemonError):
    default_message = "the container already exist"


class ContainerNotFoundError(DaemonError):
    default_message = "the container selected does not exist"


class ContainerRunningError(DaemonError):
    default_message = "cannot perform this operation with the container running"


class ContainerStoppedError(DaemonError):
    default_message = "cannot perform this operation because the container is stopped"


class ExecInstanceNotFoundError(DaemonError):
    default_message = "the exec instance selected does not exist"


class ReadinessTimeoutError(DockerManagerError):
    """The container did not reach the running state in time."""

    def __init__(self, container_id: str, timeout: float) -> None:
        self.container_id = container_id
        self.timeout = timeout
        super().__init__(f"the container didn't get into running status for {timeout:g}s")

"""Container lifecycle orchestration.

The sequence is fixed: image check -> pull (if missing) -> create -> start ->
wait until running -> interactive session -> stop -> remove.

Once the container exists, teardown (stop then remove) is always attempted,
whatever happened in between. Teardown failures are logged; if nothing else
failed before, the first one is raised.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from docker_manager.core.config import AppSettings
from docker_manager.core.errors import DockerManagerError, ReadinessTimeoutError
from docker_manager.core.interfaces.docker import Docker
from docker_manager.core.logging import get_logger

logger = get_logger(__name__)

SessionRunner = Callable[[str], Awaitable[None]]


@dataclass
class LifecycleRequest:
    """What to run and how long to wait for it."""

    image: str
    tag: str
    arch: str
    container_name: str
    container_cmd: Sequence[str] = field(default_factory=lambda: ["sleep", "infinity"])
    ready_timeout: float = 180.0
    ready_poll_interval: float = 1.0

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "LifecycleRequest":
        return cls(
            image=settings.image,
            tag=settings.image_tag,
            arch=settings.image_arch,
            container_name=settings.container_name,
            container_cmd=list(settings.container_cmd),
            ready_timeout=settings.ready_timeout_seconds,
            ready_poll_interval=settings.ready_poll_interval_seconds,
        )


async def ensure_image(docker: Docker, image: str, tag: str, arch: str) -> bool:
    """Pull `image:tag` if it is not available locally.

    Returns True when a pull was needed.
    """

    if await docker.check_if_image_already_exists(image, tag):
        return False

    logger.info("couldn't find image locally, downloading...", image=f"{image}:{tag}", arch=arch)
    await docker.pull_image_from_registry(image, tag, arch)
    return True


async def wait_until_ready(
    docker: Docker,
    container_id: str,
    *,
    timeout: float,
    interval: float,
) -> None:
    """Poll the container status every `interval` seconds until it is running.

    Raises `ReadinessTimeoutError` once `timeout` seconds have elapsed. Errors
    from the status call propagate unchanged.
    """

    async def _poll() -> None:
        while True:
            await asyncio.sleep(interval)
            if await docker.check_if_container_is_ready(container_id):
                return

    try:
        await asyncio.wait_for(_poll(), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise ReadinessTimeoutError(container_id, timeout) from exc


async def teardown_container(docker: Docker, container_id: str) -> list[DockerManagerError]:
    """Stop then remove the container. Both steps are always attempted."""

    errors: list[DockerManagerError] = []

    logger.info("stopping the container, please wait...", container_id=container_id)
    try:
        if not await docker.stop_container(container_id):
            logger.info("container was already stopped", container_id=container_id)
    except DockerManagerError as exc:
        logger.error("failed to stop container", container_id=container_id, error=str(exc))
        errors.append(exc)

    logger.info("removing the container, please wait...", container_id=container_id)
    try:
        await docker.remove_container(container_id)
    except DockerManagerError as exc:
        logger.error("failed to remove container", container_id=container_id, error=str(exc))
        errors.append(exc)

    return errors


async def run_lifecycle(
    docker: Docker,
    request: LifecycleRequest,
    session: SessionRunner,
) -> None:
    """Run the whole container lifecycle around `session(container_id)`."""

    await ensure_image(docker, request.image, request.tag, request.arch)

    logger.info(
        "initiating container",
        name=request.container_name,
        image=f"{request.image}:{request.tag}",
    )
    container_id = await docker.create_container(
        request.container_name,
        request.image,
        request.tag,
        request.container_cmd,
    )

    try:
        await docker.run_container(container_id)

        logger.info("waiting for container to be in running state...", container_id=container_id)
        await wait_until_ready(
            docker,
            container_id,
            timeout=request.ready_timeout,
            interval=request.ready_poll_interval,
        )

        await session(container_id)
    except BaseException:
        await teardown_container(docker, container_id)
        raise

    errors = await teardown_container(docker, container_id)
    if errors:
        raise errors[0]

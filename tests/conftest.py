"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable, Sequence

import httpx
import pytest
import pytest_asyncio

from docker_manager.adapters.http_client import SimpleHttpClient
from docker_manager.adapters.simple_docker import SimpleDocker
from docker_manager.core.config import AppSettings

ENDPOINT = "http://docker.test:2375"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeDocker:
    """In-memory `Docker` implementation that records every call."""

    def __init__(
        self,
        *,
        image_exists: bool = True,
        ready_after: int = 1,
        exec_output: str = "load average: 0.00",
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.image_exists = image_exists
        self.ready_after = ready_after
        self.exec_output = exec_output
        self.failures = failures or {}
        self.calls: list[tuple[str, tuple]] = []
        self.ready_checks = 0
        self.exec_counter = 0

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    async def check_if_image_already_exists(self, image: str, tag: str) -> bool:
        self._record("check_if_image_already_exists", image, tag)
        return self.image_exists

    async def pull_image_from_registry(self, image: str, tag: str, arch: str) -> None:
        self._record("pull_image_from_registry", image, tag, arch)

    async def create_container(self, name: str, image: str, tag: str, cmd: Sequence[str]) -> str:
        self._record("create_container", name, image, tag, list(cmd))
        return "c0ffee"

    async def run_container(self, container_id: str) -> None:
        self._record("run_container", container_id)

    async def check_if_container_is_ready(self, container_id: str) -> bool:
        self._record("check_if_container_is_ready", container_id)
        self.ready_checks += 1
        return self.ready_checks >= self.ready_after

    async def generate_exec_instance(self, container_id: str, cmd: Sequence[str]) -> str:
        self._record("generate_exec_instance", container_id, list(cmd))
        self.exec_counter += 1
        return f"exec-{self.exec_counter}"

    async def start_exec_instance(self, exec_id: str) -> str:
        self._record("start_exec_instance", exec_id)
        return self.exec_output

    async def stop_container(self, container_id: str) -> bool:
        self._record("stop_container", container_id)
        return True

    async def remove_container(self, container_id: str) -> None:
        self._record("remove_container", container_id)


@pytest.fixture
def fake_docker() -> FakeDocker:
    return FakeDocker()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and `.env` files."""
    for key in (
        "DOCKER_MANAGER_ENDPOINT",
        "DOCKER_MANAGER_IMAGE",
        "DOCKER_MANAGER_LOG_LEVEL",
        "DOCKER_MANAGER_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(endpoint=ENDPOINT)


@pytest_asyncio.fixture
async def docker_factory():
    """Build a `SimpleDocker` whose HTTP traffic is answered by `handler`."""

    clients: list[SimpleHttpClient] = []

    def _make(handler: Handler) -> SimpleDocker:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_client = SimpleHttpClient(client)
        clients.append(http_client)
        return SimpleDocker(ENDPOINT, http_client)

    yield _make

    for http_client in clients:
        await http_client.aclose()

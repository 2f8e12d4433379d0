"""Adaptadores de I/O (HTTP contra el daemon)."""

from docker_manager.adapters.http_client import SimpleHttpClient, build_async_client
from docker_manager.adapters.simple_docker import SimpleDocker

__all__ = ["SimpleDocker", "SimpleHttpClient", "build_async_client"]

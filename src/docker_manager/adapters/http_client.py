"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las llamadas al daemon.
- Traduce fallos de transporte a `HttpClientError`.
- Facilita testeo: se puede construir sobre un `httpx.MockTransport`.
"""

from __future__ import annotations

from types import TracebackType
from typing import Mapping

import httpx

from docker_manager.core.config import AppSettings
from docker_manager.core.errors import HttpClientError
from docker_manager.core.interfaces.http import HttpClient, HttpResponse


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del proyecto."""

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )


class SimpleHttpClient(HttpClient):
    """`HttpClient` sobre un `httpx.AsyncClient` compartido."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._client = client or build_async_client(settings)

    async def __aenter__(self) -> "SimpleHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return await self._run_request("GET", url, headers)

    async def post(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str = "",
    ) -> HttpResponse:
        return await self._run_request("POST", url, headers, body)

    async def delete(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return await self._run_request("DELETE", url, headers)

    async def _run_request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None,
        body: str = "",
    ) -> HttpResponse:
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers) if headers else None,
                content=body.encode("utf-8") if body else None,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HttpClientError(method, url, exc) from exc
        return HttpResponse(status_code=response.status_code, body=response.content)

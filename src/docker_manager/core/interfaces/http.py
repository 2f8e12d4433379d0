"""Contrato del transporte HTTP.

Por qué Protocol:
- `SimpleDocker` solo necesita código de estado y body crudo; cualquier
  transporte que cumpla este contrato es intercambiable (httpx real, stubs
  en tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus raw body of an HTTP exchange."""

    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class HttpClient(Protocol):
    """Transporte mínimo.

    Reglas:
    - Los fallos de transporte se elevan como `HttpClientError`.
    - Un código de estado "malo" NO es un error a este nivel.
    """

    async def get(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        ...

    async def post(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str = "",
    ) -> HttpResponse:
        ...

    async def delete(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        ...

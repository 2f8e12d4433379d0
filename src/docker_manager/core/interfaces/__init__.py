"""Interfaces/abstracciones del Core.

- `HttpClient`: transporte HTTP mínimo (GET/POST/DELETE).
- `Docker`: una operación por endpoint del daemon.
"""

from docker_manager.core.interfaces.docker import Docker
from docker_manager.core.interfaces.http import HttpClient, HttpResponse

__all__ = ["Docker", "HttpClient", "HttpResponse"]

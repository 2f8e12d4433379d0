"""docker-manager: orquesta un contenedor efímero contra el daemon de Docker.

Capas (mismo reparto que el resto del proyecto):
- `core`: dominio, contratos, configuración y servicios (sin I/O concreto).
- `adapters`: I/O real (HTTP contra el daemon).
- `cli`: Typer + Rich, solo presentación.
"""

__version__ = "0.1.0"

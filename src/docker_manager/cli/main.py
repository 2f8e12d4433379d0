"""CLI principal (Typer).

Secuencia: comprobar imagen -> pull -> crear -> arrancar -> esperar `running`
-> sesión interactiva -> parar -> borrar.

Cualquier error es fatal: se registra y el proceso sale con código 1.
"""

from __future__ import annotations

import asyncio

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from docker_manager import __version__
from docker_manager.adapters.http_client import SimpleHttpClient, build_async_client
from docker_manager.adapters.simple_docker import SimpleDocker
from docker_manager.cli.ui_components import build_exec_live, build_exec_panel, print_banner
from docker_manager.core.config import (
    DEFAULT_DOCKER_ENDPOINT,
    AppSettings,
    endpoint_from_environment,
)
from docker_manager.core.errors import DockerManagerError
from docker_manager.core.logging import get_logger, setup_logging
from docker_manager.core.services.lifecycle import LifecycleRequest, run_lifecycle
from docker_manager.core.services.session import InteractiveSession, SessionHooks, SessionOptions

PROG_NAME = "docker-manager"

app = typer.Typer(
    name=PROG_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"docker-manager {__version__}")
        raise typer.Exit()


def resolve_settings(
    endpoint: str,
    *,
    image: str | None = None,
    tag: str | None = None,
    arch: str | None = None,
    name: str | None = None,
    log_level: str | None = None,
) -> AppSettings:
    """Combina entorno y flags.

    El endpoint del entorno (`DOCKER_MANAGER_ENDPOINT`) tiene prioridad sobre
    `-e`; para el resto de opciones manda el flag si se pasó.
    """

    overrides: dict[str, str] = {
        key: value
        for key, value in {
            "image": image,
            "image_tag": tag,
            "image_arch": arch,
            "container_name": name,
            "log_level": log_level,
        }.items()
        if value is not None
    }

    overrides["endpoint"] = endpoint_from_environment() or endpoint

    return AppSettings(**overrides)


async def manage(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Ejecuta el ciclo de vida completo contra `settings.endpoint`."""

    options = SessionOptions(
        exec_cmd=list(settings.exec_cmd),
        interval=settings.exec_interval_seconds,
        quit_keyword=settings.quit_keyword,
    )

    async with SimpleHttpClient(build_async_client(settings, transport=transport)) as http_client:
        docker = SimpleDocker(settings.endpoint, http_client)

        async def _session(container_id: str) -> None:
            with build_exec_live(_console, options.quit_keyword, settings.container_name) as live:
                hooks = SessionHooks(
                    output=lambda text: live.update(
                        build_exec_panel(text, options.quit_keyword, settings.container_name)
                    )
                )
                await InteractiveSession(docker, container_id, options, hooks=hooks).run()

        await run_lifecycle(docker, LifecycleRequest.from_settings(settings), _session)


@app.command(
    help=(
        f"Docker Manager v{__version__}\n\n"
        "Run a container, stream command output from it, then tear it down."
    ),
)
def main(
    endpoint: str = typer.Option(
        DEFAULT_DOCKER_ENDPOINT,
        "-e",
        "--endpoint",
        help="docker endpoint to connect (DOCKER_MANAGER_ENDPOINT wins if set)",
    ),
    image: str | None = typer.Option(None, "--image", help="Image name (default: ubuntu)."),
    tag: str | None = typer.Option(None, "--tag", help="Image tag (default: 20.04)."),
    arch: str | None = typer.Option(None, "--arch", help="Image platform (default: x86-64)."),
    name: str | None = typer.Option(None, "--name", help="Container name (default: ubuntu2004)."),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    try:
        settings = resolve_settings(
            endpoint,
            image=image,
            tag=tag,
            arch=arch,
            name=name,
            log_level=log_level,
        )
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red]\n{exc}", markup=True, highlight=False)
        raise typer.Exit(code=1) from exc

    setup_logging(settings.log_level, settings.log_format)

    print_banner(_console, settings.endpoint)
    logger.info("docker manager set to endpoint", endpoint=settings.endpoint)

    try:
        asyncio.run(manage(settings))
    except DockerManagerError as exc:
        logger.error("docker manager failed", error=str(exc), error_type=type(exc).__name__)
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        logger.warning("interrupted by user")
        raise typer.Exit(code=130)


def run() -> None:
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    run()

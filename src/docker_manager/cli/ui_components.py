"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la secuencia de comandos con detalles visuales.
- La sesión interactiva solo conoce un callback; aquí se decide cómo se pinta.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from docker_manager import __version__


def print_banner(console: Console, endpoint: str) -> None:
    """Imprime el banner de bienvenida con el endpoint en uso."""

    title = Text(f"Docker Manager v{__version__}", style="bold cyan")
    subtitle = Text(endpoint, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_exec_panel(output: str, quit_keyword: str, container: str | None = None) -> Panel:
    """Panel con la última salida del comando ejecutado en el contenedor."""

    body = Text()
    body.append(f'Type "{quit_keyword}" and press ENTER to finish\n', style="bold yellow")
    body.append_text(Text.from_ansi(output.replace("\r\n", "\n").rstrip("\n")))

    title = Text(container, style="bold") if container else None
    return Panel(body, title=title, border_style="green")


def build_exec_live(console: Console, quit_keyword: str, container: str | None = None) -> Live:
    """`Live` que se actualiza con `build_exec_panel` en cada refresco."""

    return Live(
        build_exec_panel("waiting for first output...", quit_keyword, container),
        console=console,
        refresh_per_second=4,
        transient=False,
    )

"""Interactive session: live exec output plus a keyboard listener.

Two asyncio tasks share a single `asyncio.Event` used as the shutdown signal:

- the display worker creates and starts a fresh exec instance every
  `interval` seconds and hands the output to the UI hook;
- the input worker reads lines and sets the event once the quit keyword
  is typed (or stdin reaches EOF).

`InteractiveSession.run` returns only after both tasks have finished. An
error in the display worker is fatal: the event is set, the input worker is
cancelled and the error is re-raised to the caller.
"""

from __future__ import annotations

import asyncio
import sys
import threading
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import AsyncIterator, Callable, Sequence

from docker_manager.core.interfaces.docker import Docker
from docker_manager.core.logging import get_logger

logger = get_logger(__name__)

LineSource = Callable[[], AsyncIterator[str]]


async def stdin_lines() -> AsyncIterator[str]:
    """Yield stdin lines without blocking the event loop.

    The blocking reads happen on a daemon thread so a pending read never
    keeps the interpreter alive after the session is over.
    """

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[str | None] = asyncio.Queue()

    def _push(item: str | None) -> bool:
        try:
            loop.call_soon_threadsafe(queue.put_nowait, item)
        except RuntimeError:
            # loop already closed
            return False
        return True

    def _pump() -> None:
        for line in sys.stdin:
            if not _push(line):
                return
        _push(None)

    threading.Thread(target=_pump, name="stdin-reader", daemon=True).start()

    while (line := await queue.get()) is not None:
        yield line


@dataclass
class SessionOptions:
    """Parameters of the interactive session."""

    exec_cmd: Sequence[str]
    interval: float = 0.8
    quit_keyword: str = "e"


@dataclass
class SessionHooks:
    """Optional callbacks for UI layers."""

    output: Callable[[str], None] | None = None


@dataclass
class InteractiveSession:
    docker: Docker
    container_id: str
    options: SessionOptions
    hooks: SessionHooks = field(default_factory=SessionHooks)
    lines: LineSource = stdin_lines

    async def run(self) -> None:
        shutdown = asyncio.Event()
        tasks = {
            asyncio.create_task(self._display(shutdown), name="exec-display"),
            asyncio.create_task(self._read_keyboard(shutdown), name="keyboard-reader"),
        }

        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            shutdown.set()
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        for task in done:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()

    async def _display(self, shutdown: asyncio.Event) -> None:
        while not shutdown.is_set():
            try:
                await asyncio.wait_for(shutdown.wait(), timeout=self.options.interval)
                return
            except asyncio.TimeoutError:
                pass

            exec_id = await self.docker.generate_exec_instance(
                self.container_id, self.options.exec_cmd
            )
            output = await self.docker.start_exec_instance(exec_id)
            if self.hooks.output:
                self.hooks.output(output)

    async def _read_keyboard(self, shutdown: asyncio.Event) -> None:
        try:
            async with aclosing(self.lines()) as lines:
                async for line in lines:
                    if line.strip() == self.options.quit_keyword:
                        logger.debug("quit keyword received")
                        return
            logger.debug("input closed, finishing session")
        finally:
            shutdown.set()

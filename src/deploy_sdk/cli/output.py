"""Terminal output for the deploy CLI.

Status lines go to stderr and results go to stdout. Message text is always
escaped before it reaches rich, so API-provided strings containing square
brackets are printed as-is.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from rich.console import Console
from rich.markup import escape

COMMAND_NAME = "deploy"

logger = logging.getLogger(__name__)


def get_command_name(subcommand: str | None = None) -> str:
    if not subcommand:
        return COMMAND_NAME
    return f"{COMMAND_NAME} {subcommand}"


def format_elapsed(seconds: float) -> str:
    millis = int(seconds * 1000)
    if millis < 1000:
        return f"{millis}ms"
    if millis < 60_000:
        return f"{millis // 1000}s"
    if millis < 3_600_000:
        return f"{millis // 60_000}m"
    return f"{millis // 3_600_000}h"


def stamp() -> Callable[[], str]:
    """Start a timer; the returned callable renders the elapsed time as ``[1s]``."""
    started = time.monotonic()

    def render() -> str:
        return f"[{format_elapsed(time.monotonic() - started)}]"

    return render


class Output:
    def __init__(self, stdout, stderr, *, debug: bool = False) -> None:
        self.debug_enabled = debug
        self._out = Console(file=stdout, soft_wrap=True, highlight=False)
        self._err = Console(file=stderr, soft_wrap=True, highlight=False)

    def print(self, message: str, *, style: str | None = None) -> None:
        self._out.print(escape(message), style=style)

    def success(self, message: str) -> None:
        self._out.print(f"[cyan]> Success![/cyan] {escape(message)}")

    def warn(self, message: str) -> None:
        self._err.print(f"[yellow][bold]WARN![/bold][/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self._err.print(f"[red][bold]Error![/bold][/red] {escape(message)}")

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._err.print(f"> [debug] {message}", style="dim", markup=False)

    def spinner(self, label: str) -> Callable[[], None]:
        """Show a transient spinner on stderr and return the function that stops it."""
        if not self._err.is_terminal:
            logger.debug("spinner: %s", label)
            return lambda: None

        from rich.live import Live
        from rich.spinner import Spinner

        live = Live(
            Spinner("dots", text=escape(label)),
            console=self._err,
            refresh_per_second=10,
            transient=True,
        )
        live.start()
        stopped = False

        def stop() -> None:
            nonlocal stopped
            if stopped:
                return
            stopped = True
            live.stop()

        return stop

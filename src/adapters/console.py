"""Rich console adapters.

Why a builder:
- Centralizes how the console is created (color on/off) so every command and
  every menu writes through the same object.
- Tests build a console over an in-memory file instead.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from core.config import AppSettings


def build_console(
    settings: AppSettings | None = None,
    *,
    file: TextIO | None = None,
) -> Console:
    """Create a `rich.Console` honouring the `color` setting."""

    settings = settings or AppSettings()
    if settings.color:
        return Console(file=file, highlight=False)
    return Console(file=file, highlight=False, no_color=True)


class RichReporter:
    """`Reporter` that prints green successes, red errors and plain info."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False)

    def error(self, message: str) -> None:
        self.console.print(message, style="red", markup=False)

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

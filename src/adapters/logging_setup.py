"""Diagnostic logging.

The operator reads the menus on stdout; the log goes to stderr through rich so
it stays readable next to the interactive session.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )

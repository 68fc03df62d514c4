"""Doctor command for environment diagnostics."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.table import Table

from adapters.console import build_console
from core.config import AppSettings, get_user_env_file


def build_doctor_table(settings: AppSettings, console: Console) -> Table:
    table = Table(title="Avtorent Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row(
        "User .env",
        "FOUND" if env_file.exists() else "MISSING",
        str(env_file),
    )
    table.add_row("Language", settings.language.value, settings.language.label())
    table.add_row("Log level", settings.log_level, "stderr")
    table.add_row("Banner", "ON" if settings.show_banner else "OFF", "AVTORENT_SHOW_BANNER")

    if not settings.color:
        table.add_row("Color", "OFF", "AVTORENT_COLOR=false")
    else:
        table.add_row("Color", console.color_system or "none", "detected by rich")
    table.add_row(
        "Interactive",
        "YES" if console.is_terminal else "NO",
        "stdin piped" if not sys.stdin.isatty() else "tty",
    )
    table.add_row("Encoding", console.encoding, "")
    return table


def run() -> None:
    """Show effective settings and terminal capabilities."""

    settings = AppSettings()
    console = build_console(settings)
    console.print(build_doctor_table(settings, console))

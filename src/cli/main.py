"""Typer application.

`avtorent` with no command starts the interactive menu session; `doctor`
shows the effective configuration.
"""

from __future__ import annotations

from typing import Optional

import typer

from adapters.logging_setup import configure_logging
from cli import doctor
from cli.app import start_session
from core.config import AppSettings
from core.domain.language import Language

app = typer.Typer(
    add_completion=False,
    help="Car-rental record keeper: orders, drivers and vehicles.",
)
app.command(name="doctor")(doctor.run)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    lang: Optional[Language] = typer.Option(
        None,
        "--lang",
        help="Language of prompts and messages (overrides AVTORENT_LANGUAGE).",
    ),
    no_banner: bool = typer.Option(
        False,
        "--no-banner",
        help="Do not print the welcome banner.",
    ),
) -> None:
    """Start the interactive menu session."""

    if ctx.invoked_subcommand is not None:
        return

    settings = AppSettings()
    overrides: dict[str, object] = {}
    if lang is not None:
        overrides["language"] = lang
    if no_banner:
        overrides["show_banner"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings)
    start_session(settings)


def run() -> None:
    app()


if __name__ == "__main__":
    run()

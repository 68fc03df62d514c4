"""Interactive session: the main menu and the wiring of its three managers.

Why a class:
- One object owns the three managers for the lifetime of the process, and a
  test can drive the whole session from a scripted input stream.
"""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console

from adapters.console import RichReporter, build_console
from cli.menus import CarMenu, DriverMenu, MenuContext, OrderMenu
from cli.messages import Messages
from cli.prompts import Prompter
from cli.ui_components import print_banner, print_menu
from core.config import AppSettings
from core.interfaces.reporter import Reporter
from core.services import CarManager, DriverManager, OrderManager

logger = logging.getLogger(__name__)

_MAIN_OPTIONS = ("main.orders", "main.drivers", "main.cars", "main.exit")


class Application:
    def __init__(
        self,
        *,
        console: Console,
        reporter: Reporter,
        messages: Messages,
        stream: TextIO | None = None,
    ) -> None:
        self.console = console
        self.reporter = reporter
        self.t = messages
        self.prompter = Prompter(console, reporter, messages, stream=stream)

        self.orders = OrderManager()
        self.drivers = DriverManager()
        self.cars = CarManager()

        ctx = MenuContext(console=console, reporter=reporter, prompter=self.prompter, t=messages)
        self.order_menu = OrderMenu(ctx, self.orders)
        self.driver_menu = DriverMenu(ctx, self.drivers)
        self.car_menu = CarMenu(ctx, self.cars)

    def run(self) -> None:
        """Main menu loop; returns on "exit" or at end of input."""

        routes = {1: self.order_menu.show, 2: self.driver_menu.show, 3: self.car_menu.show}
        while True:
            try:
                print_menu(self.console, self.t("main.title"), [self.t(k) for k in _MAIN_OPTIONS])
                choice = self.prompter.read_choice(self.t("menu.choice"))
                if choice is None:
                    self.reporter.error(self.t("main.invalid"))
                    continue
                if choice == 4:
                    self.reporter.info(self.t("main.goodbye"))
                    return
                route = routes.get(choice)
                if route is None:
                    self.reporter.error(self.t("menu.out_of_range", maximum=4))
                    continue
                route()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.reporter.info(self.t("main.goodbye"))
                return
            except Exception as exc:
                logger.exception("Unexpected error in menu loop")
                self.reporter.error(self.t("main.error", error=exc))


def start_session(
    settings: AppSettings,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> Application:
    """Build the session from settings, run it and return it (for inspection)."""

    console = console or build_console(settings)
    messages = Messages(settings.language)
    reporter = RichReporter(console)

    if settings.show_banner:
        print_banner(console, messages)

    app = Application(console=console, reporter=reporter, messages=messages, stream=stream)
    try:
        app.run()
    except Exception as exc:
        logger.exception("Session aborted")
        reporter.error(messages("main.fatal", error=exc))
    return app

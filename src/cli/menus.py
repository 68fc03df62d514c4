"""Menu loops for orders, drivers and vehicles.

Each menu owns one manager and turns numbered choices into prompt/validate/store
sequences. In-record fields re-prompt until valid; a duplicate id, an unknown
id or an end time not after the start time aborts the current operation and
returns to the menu.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import ValidationError
from rich.console import Console

from cli.messages import Messages
from cli.prompts import Prompter
from cli.ui_components import (
    build_drivers_table,
    build_orders_table,
    build_vehicle_tables,
    print_menu,
)
from core.domain.models import (
    MAX_MINIBUS_SEATS,
    MIN_MANUFACTURE_YEAR,
    MIN_MINIBUS_SEATS,
    Driver,
    Order,
    build_vehicle,
    current_year,
)
from core.errors import (
    DuplicateIdError,
    EmptyCollectionError,
    InvalidTimeRangeError,
    RecordNotFoundError,
    check_time_range,
)
from core.interfaces.reporter import Reporter
from core.services import CarManager, DriverManager, OrderManager


@dataclass
class MenuContext:
    """What every menu needs to talk to the operator."""

    console: Console
    reporter: Reporter
    prompter: Prompter
    t: Messages


def first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))


class ManagerMenu:
    """Numbered-choice loop; the last choice returns to the main menu."""

    title_key = ""
    option_keys: tuple[str, ...] = ()

    def __init__(self, ctx: MenuContext) -> None:
        self.ctx = ctx
        self.console = ctx.console
        self.reporter = ctx.reporter
        self.prompter = ctx.prompter
        self.t = ctx.t

    def actions(self) -> list[Callable[[], None]]:
        raise NotImplementedError

    def show(self) -> None:
        actions = self.actions()
        back = len(actions) + 1
        while True:
            options = [self.t(key) for key in self.option_keys]
            options.append(self.t("menu.back", number=back))
            print_menu(self.console, self.t(self.title_key), options)

            choice = self.prompter.read_choice(self.t("menu.choice"))
            if choice is None:
                self.reporter.error(self.t("menu.invalid"))
                continue
            if choice == back:
                return
            if not 1 <= choice < back:
                self.reporter.error(self.t("menu.out_of_range", maximum=back))
                continue
            actions[choice - 1]()


class OrderMenu(ManagerMenu):
    title_key = "orders.title"
    option_keys = ("orders.add", "orders.list")

    def __init__(self, ctx: MenuContext, manager: OrderManager) -> None:
        super().__init__(ctx)
        self.manager = manager

    def actions(self) -> list[Callable[[], None]]:
        return [self.add_order, self.list_orders]

    def add_order(self) -> None:
        t, ask = self.t, self.prompter

        order_id = ask.ask_int(t("orders.prompt.id"), t("orders.field.id"))
        try:
            self.manager.ensure_unique(order_id)
        except DuplicateIdError:
            self.reporter.error(t("orders.duplicate"))
            return

        order_date = ask.ask_date(t("orders.prompt.date"))
        start_time = ask.ask_time(t("orders.prompt.start"))
        end_time = ask.ask_time(t("orders.prompt.end"))
        try:
            check_time_range(start_time, end_time)
        except InvalidTimeRangeError:
            self.reporter.error(t("orders.bad_range"))
            return

        driver_id = ask.ask_int(t("orders.prompt.driver"), t("orders.field.driver"))
        car_id = ask.ask_int(t("orders.prompt.car"), t("orders.field.car"))

        try:
            self.manager.add(
                Order(
                    id=order_id,
                    order_date=order_date,
                    start_time=start_time,
                    end_time=end_time,
                    driver_id=driver_id,
                    car_id=car_id,
                )
            )
        except DuplicateIdError:
            self.reporter.error(t("orders.duplicate"))
            return
        except ValidationError as exc:
            self.reporter.error(t("orders.add_failed", error=first_error(exc)))
            return
        self.reporter.success(t("orders.added"))

    def list_orders(self) -> None:
        orders = self.manager.list_orders()
        if not orders:
            self.reporter.info(self.t("orders.empty"))
            return
        self.console.print(build_orders_table(orders, self.t))
        self.console.print(self.t("orders.total", count=len(orders)), style="cyan")


class DriverMenu(ManagerMenu):
    title_key = "drivers.title"
    option_keys = ("drivers.add", "drivers.edit", "drivers.delete", "drivers.list")

    def __init__(self, ctx: MenuContext, manager: DriverManager) -> None:
        super().__init__(ctx)
        self.manager = manager

    def actions(self) -> list[Callable[[], None]]:
        return [self.add_driver, self.edit_driver, self.delete_driver, self.list_drivers]

    def add_driver(self) -> None:
        t, ask = self.t, self.prompter

        driver_id = ask.ask_int(t("drivers.prompt.id"), t("drivers.field.id"))
        try:
            self.manager.ensure_unique(driver_id)
        except DuplicateIdError:
            self.reporter.error(t("drivers.duplicate"))
            return

        first_name = ask.ask_non_empty(t("drivers.prompt.first"), t("drivers.field.first"))
        last_name = ask.ask_non_empty(t("drivers.prompt.last"), t("drivers.field.last"))

        try:
            self.manager.add(Driver(id=driver_id, first_name=first_name, last_name=last_name))
        except DuplicateIdError:
            self.reporter.error(t("drivers.duplicate"))
            return
        except ValidationError as exc:
            self.reporter.error(t("drivers.add_failed", error=first_error(exc)))
            return
        self.reporter.success(t("drivers.added"))

    def _lookup(self, prompt_key: str, empty_key: str) -> int | None:
        """Ask for an existing driver id; None when the operation must stop."""

        try:
            self.manager.ensure_not_empty()
        except EmptyCollectionError:
            self.reporter.error(self.t(empty_key))
            return None

        driver_id = self.prompter.ask_int(self.t(prompt_key), self.t("drivers.field.id"))
        try:
            self.manager.get(driver_id)
        except RecordNotFoundError:
            self.reporter.error(self.t("drivers.not_found"))
            return None
        return driver_id

    def edit_driver(self) -> None:
        t = self.t
        driver_id = self._lookup("drivers.prompt.edit_id", "drivers.edit_empty")
        if driver_id is None:
            return

        first_name = self.prompter.ask_optional(t("drivers.prompt.new_first"))
        last_name = self.prompter.ask_optional(t("drivers.prompt.new_last"))
        try:
            self.manager.edit(driver_id, first_name=first_name, last_name=last_name)
        except ValidationError as exc:
            self.reporter.error(t("drivers.edit_failed", error=first_error(exc)))
            return
        self.reporter.success(t("drivers.updated"))

    def delete_driver(self) -> None:
        driver_id = self._lookup("drivers.prompt.delete_id", "drivers.delete_empty")
        if driver_id is None:
            return
        self.manager.delete(driver_id)
        self.reporter.success(self.t("drivers.deleted"))

    def list_drivers(self) -> None:
        drivers = self.manager.list_drivers()
        if not drivers:
            self.reporter.info(self.t("drivers.empty"))
            return
        self.console.print(build_drivers_table(drivers, self.t))
        self.console.print(self.t("drivers.total", count=len(drivers)), style="cyan")


class CarMenu(ManagerMenu):
    title_key = "cars.title"
    option_keys = ("cars.add", "cars.delete", "cars.list")

    def __init__(self, ctx: MenuContext, manager: CarManager) -> None:
        super().__init__(ctx)
        self.manager = manager

    def actions(self) -> list[Callable[[], None]]:
        return [self.add_vehicle, self.delete_vehicle, self.list_vehicles]

    def add_vehicle(self) -> None:
        t, ask = self.t, self.prompter

        for key in ("cars.choose_type", "cars.type.passenger", "cars.type.minibus"):
            self.console.print(t(key), markup=False)
        variant = ask.ask_int(t("cars.prompt.type"), t("cars.field.type"), minimum=1, maximum=2)

        data: dict[str, object]
        if variant == 1:
            data = {
                "kind": "passenger_car",
                "child_seat": ask.ask_bool(t("cars.prompt.child_seat")),
            }
        else:
            data = {
                "kind": "minibus",
                "seats": ask.ask_int(
                    t("cars.prompt.seats"),
                    t("cars.field.seats"),
                    minimum=MIN_MINIBUS_SEATS,
                    maximum=MAX_MINIBUS_SEATS,
                ),
            }

        vehicle_id = ask.ask_int(t("cars.prompt.id"), t("cars.field.id"))
        try:
            self.manager.ensure_unique(vehicle_id)
        except DuplicateIdError:
            self.reporter.error(t("cars.duplicate"))
            return

        data["id"] = vehicle_id
        data["brand"] = ask.ask_non_empty(t("cars.prompt.brand"), t("cars.field.brand"))
        data["model"] = ask.ask_non_empty(t("cars.prompt.model"), t("cars.field.model"))
        data["year"] = ask.ask_int(
            t("cars.prompt.year"),
            t("cars.field.year"),
            minimum=MIN_MANUFACTURE_YEAR,
            maximum=current_year(),
        )

        try:
            self.manager.add(build_vehicle(data))
        except DuplicateIdError:
            self.reporter.error(t("cars.duplicate"))
            return
        except ValidationError as exc:
            self.reporter.error(t("cars.add_failed", error=first_error(exc)))
            return
        self.reporter.success(t("cars.added"))

    def delete_vehicle(self) -> None:
        t = self.t
        try:
            self.manager.ensure_not_empty()
        except EmptyCollectionError:
            self.reporter.error(t("cars.delete_empty"))
            return

        vehicle_id = self.prompter.ask_int(t("cars.prompt.delete_id"), t("cars.field.id"))
        try:
            self.manager.delete(vehicle_id)
        except RecordNotFoundError:
            self.reporter.error(t("cars.not_found"))
            return
        self.reporter.success(t("cars.deleted"))

    def list_vehicles(self) -> None:
        t = self.t
        listing = self.manager.list_vehicles()
        if not listing.total:
            self.reporter.info(t("cars.empty"))
            return
        self.console.print(t("cars.header"), style="bold cyan", markup=False)
        for table in build_vehicle_tables(listing, t):
            self.console.print(table)
        self.console.print(t("cars.total", count=listing.total), style="cyan")
        self.console.print(
            t(
                "cars.breakdown",
                passenger=len(listing.passenger_cars),
                minibus=len(listing.minibuses),
            ),
            style="cyan",
        )

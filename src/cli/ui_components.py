"""UI components for the CLI (Rich).

Why separate components:
- Keeps the menu flow apart from visual details.
- Listings are plain functions of the data, easy to render into a test console.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cli.messages import Messages
from core.domain.models import Driver, Minibus, Order, PassengerCar, Vehicle
from core.services.car_manager import VehicleListing


def print_banner(console: Console, t: Messages) -> None:
    """Print the welcome banner.

    Why here:
    - The session can switch it off (`--no-banner`) without touching the menus.
    """

    title = Text(t("banner.title"), style="bold cyan")
    subtitle = Text(t("banner.subtitle"), style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_menu(console: Console, title: str, options: Sequence[str]) -> None:
    console.print()
    console.print(title, style="bold blue", markup=False)
    for option in options:
        console.print(option, markup=False)


def build_orders_table(orders: Sequence[Order], t: Messages) -> Table:
    table = Table(title=t("orders.header"), title_style="bold cyan")
    table.add_column(t("orders.col.id"), style="cyan", justify="right", no_wrap=True)
    table.add_column(t("orders.col.date"), style="white")
    table.add_column(t("orders.col.start"), style="green")
    table.add_column(t("orders.col.end"), style="green")
    table.add_column(t("orders.col.driver"), style="magenta", justify="right")
    table.add_column(t("orders.col.car"), style="magenta", justify="right")
    for order in orders:
        table.add_row(
            f"#{order.id}",
            f"{order.order_date:%d.%m}",
            f"{order.start_time:%H:%M}",
            f"{order.end_time:%H:%M}",
            str(order.driver_id),
            str(order.car_id),
        )
    return table


def build_drivers_table(drivers: Sequence[Driver], t: Messages) -> Table:
    table = Table(title=t("drivers.header"), title_style="bold cyan")
    table.add_column(t("drivers.col.id"), style="cyan", justify="right", no_wrap=True)
    table.add_column(t("drivers.col.first"), style="white")
    table.add_column(t("drivers.col.last"), style="white")
    for driver in drivers:
        table.add_row(str(driver.id), driver.first_name, driver.last_name)
    return table


def vehicle_row(vehicle: Vehicle, t: Messages) -> tuple[str, ...]:
    """Row cells for one vehicle; the last cell depends on the variant."""

    if isinstance(vehicle, PassengerCar):
        extra = t("yes") if vehicle.child_seat else t("no")
    elif isinstance(vehicle, Minibus):
        extra = str(vehicle.seats)
    else:
        raise TypeError(f"unknown vehicle variant: {type(vehicle).__name__}")
    return (str(vehicle.id), vehicle.brand, vehicle.model, str(vehicle.year), extra)


def _vehicle_table(title: str, extra_column: str, t: Messages) -> Table:
    table = Table(title=title, title_style="bold")
    table.add_column(t("cars.col.id"), style="cyan", justify="right", no_wrap=True)
    table.add_column(t("cars.col.brand"), style="white")
    table.add_column(t("cars.col.model"), style="white")
    table.add_column(t("cars.col.year"), justify="right")
    table.add_column(extra_column, style="magenta")
    return table


def build_vehicle_tables(listing: VehicleListing, t: Messages) -> list[Table]:
    """One table per non-empty variant group: passenger cars, then minibuses."""

    tables: list[Table] = []
    if listing.passenger_cars:
        table = _vehicle_table(t("cars.group.passenger"), t("cars.col.child_seat"), t)
        for car in listing.passenger_cars:
            table.add_row(*vehicle_row(car, t))
        tables.append(table)
    if listing.minibuses:
        table = _vehicle_table(t("cars.group.minibus"), t("cars.col.seats"), t)
        for bus in listing.minibuses:
            table.add_row(*vehicle_row(bus, t))
        tables.append(table)
    return tables

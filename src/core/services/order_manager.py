"""Order bookkeeping.

Orders can only be added and listed: once accepted an order is never edited or
removed during the session.
"""

from __future__ import annotations

from core.domain.models import Order
from core.services.registry import RecordRegistry


class OrderManager:
    def __init__(self) -> None:
        self.orders: RecordRegistry[Order] = RecordRegistry("order")

    def __len__(self) -> int:
        return len(self.orders)

    def ensure_unique(self, order_id: int) -> None:
        self.orders.ensure_unique(order_id)

    def add(self, order: Order) -> Order:
        return self.orders.add(order)

    def list_orders(self) -> list[Order]:
        """Orders by date, then by start time."""

        return self.orders.sorted(key=Order.sort_key)

"""Driver bookkeeping: add, partial edit, delete, list."""

from __future__ import annotations

import logging

from core.domain.models import Driver
from core.services.registry import RecordRegistry

logger = logging.getLogger(__name__)


class DriverManager:
    def __init__(self) -> None:
        self.drivers: RecordRegistry[Driver] = RecordRegistry("driver")

    def __len__(self) -> int:
        return len(self.drivers)

    def ensure_unique(self, driver_id: int) -> None:
        self.drivers.ensure_unique(driver_id)

    def ensure_not_empty(self) -> None:
        self.drivers.ensure_not_empty()

    def add(self, driver: Driver) -> Driver:
        return self.drivers.add(driver)

    def get(self, driver_id: int) -> Driver:
        return self.drivers.get(driver_id)

    def edit(
        self,
        driver_id: int,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> Driver:
        """Overwrite the names that were given.

        `None` or a blank string keeps the stored value. The updated record is
        validated as a whole before it replaces the old one, so a failed edit
        leaves the driver untouched.
        """

        current = self.drivers.get(driver_id)
        changes: dict[str, str] = {}
        if first_name is not None and first_name.strip():
            changes["first_name"] = first_name
        if last_name is not None and last_name.strip():
            changes["last_name"] = last_name
        if not changes:
            return current

        updated = Driver.model_validate({**current.model_dump(), **changes})
        logger.info("Edited driver #%d fields=%s", driver_id, sorted(changes))
        return self.drivers.replace(updated)

    def delete(self, driver_id: int) -> Driver:
        return self.drivers.remove(driver_id)

    def list_drivers(self) -> list[Driver]:
        return self.drivers.sorted()

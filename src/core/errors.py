"""Domain errors.

Why a dedicated hierarchy:
- Managers never print. They signal why an operation was rejected with a typed
  exception and the CLI picks the message (and its language).
"""

from __future__ import annotations

from datetime import time


class RentalError(Exception):
    """Base class for every business-rule rejection."""


class DuplicateIdError(RentalError):
    def __init__(self, record_id: int) -> None:
        super().__init__(f"record with id {record_id} already exists")
        self.record_id = record_id


class RecordNotFoundError(RentalError):
    def __init__(self, record_id: int) -> None:
        super().__init__(f"record with id {record_id} not found")
        self.record_id = record_id


class EmptyCollectionError(RentalError):
    """The operation needs at least one stored record."""


class InvalidTimeRangeError(RentalError, ValueError):
    def __init__(self, start: time, end: time) -> None:
        super().__init__(
            f"end time {end:%H:%M} must be later than start time {start:%H:%M}"
        )
        self.start = start
        self.end = end


def check_time_range(start: time, end: time) -> None:
    """Raise `InvalidTimeRangeError` unless `end` is strictly after `start`."""

    if end <= start:
        raise InvalidTimeRangeError(start, end)

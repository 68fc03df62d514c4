"""Id-keyed in-memory collection shared by the three managers.

Each manager owns exactly one registry. Insertion is the only place where id
uniqueness is enforced, so a registry never holds two records with one id.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Protocol, TypeVar

from core.errors import DuplicateIdError, EmptyCollectionError, RecordNotFoundError

logger = logging.getLogger(__name__)


class _HasId(Protocol):
    @property
    def id(self) -> int: ...


RecordT = TypeVar("RecordT", bound=_HasId)


class RecordRegistry(Generic[RecordT]):
    """Insertion-ordered records with unique integer ids."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._records: dict[int, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def ensure_unique(self, record_id: int) -> None:
        if record_id in self._records:
            raise DuplicateIdError(record_id)

    def ensure_not_empty(self) -> None:
        if not self._records:
            raise EmptyCollectionError(f"no {self.label} stored")

    def add(self, record: RecordT) -> RecordT:
        self.ensure_unique(record.id)
        self._records[record.id] = record
        logger.info("Added %s #%d (total %d)", self.label, record.id, len(self))
        return record

    def get(self, record_id: int) -> RecordT:
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def replace(self, record: RecordT) -> RecordT:
        if record.id not in self._records:
            raise RecordNotFoundError(record.id)
        self._records[record.id] = record
        return record

    def remove(self, record_id: int) -> RecordT:
        record = self.get(record_id)
        del self._records[record_id]
        logger.info("Removed %s #%d (total %d)", self.label, record_id, len(self))
        return record

    def sorted(self, key: Callable[[RecordT], object] | None = None) -> list[RecordT]:
        """Records ordered by `key`, by id when no key is given."""

        return sorted(self._records.values(), key=key or (lambda r: r.id))  # type: ignore[arg-type]

"""Generic in-memory entity store with audit timestamps.

One store instance holds the records of one entity type for the lifetime of
the process. Records are immutable pydantic models: updates replace the stored
record with a copy, so lists handed out earlier never see later changes.

All access goes through a single re-entrant lock per store. Callers that need
a read followed by a write to be atomic (uniqueness check, then create) wrap
both in ``with store.atomic():``.
"""

import logging
import threading
import uuid
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta
from typing import Any, Generic, Protocol, Self, TypeVar

logger = logging.getLogger(__name__)

# Fields the store owns; caller-supplied values for these are ignored.
MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class Entity(Protocol):
    """Anything with an identity and audit timestamps that can be copied with changes."""

    id: str
    created_at: datetime
    updated_at: datetime

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self: ...


T = TypeVar("T", bound=Entity)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class EntityStore(Generic[T]):
    """Ordered, thread-safe collection of records of one type."""

    def __init__(
        self,
        factory: Callable[..., T],
        clock: Callable[[], datetime] = _utcnow,
        name: str | None = None,
    ) -> None:
        self._factory = factory
        self._clock = clock
        self._records: dict[str, T] = {}
        self._lock = threading.RLock()
        self.name = name or getattr(factory, "__name__", "entity")

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Hold the store lock across several operations."""
        with self._lock:
            yield

    def list(self) -> list[T]:
        """Point-in-time copy of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def get_by_id(self, record_id: str) -> T | None:
        with self._lock:
            return self._records.get(record_id)

    def find_one(self, predicate: Callable[[T], bool]) -> T | None:
        """First record matching predicate, in insertion order."""
        with self._lock:
            for record in self._records.values():
                if predicate(record):
                    return record
            return None

    def create(self, fields: Mapping[str, Any]) -> T:
        """Append a new record with a fresh id and created_at == updated_at == now."""
        data = {k: v for k, v in fields.items() if k not in MANAGED_FIELDS}
        with self._lock:
            record_id = self._new_id()
            now = self._clock()
            record = self._factory(id=record_id, created_at=now, updated_at=now, **data)
            self._records[record_id] = record
        logger.debug("%s store: created %s", self.name, record_id)
        return record

    def update(self, record_id: str, changes: Mapping[str, Any]) -> T | None:
        """
        Merge changes over the stored record and bump updated_at.

        id and created_at never change. Returns None if record_id is unknown.
        """
        data = {k: v for k, v in changes.items() if k not in MANAGED_FIELDS}
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            data["updated_at"] = self._next_timestamp(current.updated_at)
            updated = current.model_copy(update=data)
            self._records[record_id] = updated
        logger.debug("%s store: updated %s", self.name, record_id)
        return updated

    def delete(self, record_id: str) -> bool:
        """Remove the record; True if it existed."""
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is not None:
            logger.debug("%s store: deleted %s", self.name, record_id)
        return removed is not None

    def _new_id(self) -> str:
        # Caller holds the lock.
        while True:
            record_id = str(uuid.uuid4())
            if record_id not in self._records:
                return record_id

    def _next_timestamp(self, previous: datetime) -> datetime:
        # Coarse clocks can return the same instant twice; updated_at must advance.
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

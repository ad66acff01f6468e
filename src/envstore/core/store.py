"""
Thread-safe variable store.

Holds resolved key/value entries in insertion order inside a preallocated
slot list whose capacity doubles on overflow. Keys need not be unique;
lookup returns the first match.

Locking is store-wide: a single lock guards the slots, the entry count and
the capacity, and every public operation holds it for its whole duration.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass

from envstore.exceptions import AllocationError, StoreNotInitializedError
from envstore.utils.logging import get_logger

logger = get_logger("envstore.core.store")

DEFAULT_INITIAL_CAPACITY = 10


@dataclass(frozen=True)
class Entry:
    """A single resolved key/value pair."""

    key: str
    value: str


class VariableStore:
    """
    Growable, append-only store of Entry records.

    Usage:
        store = VariableStore()
        store.initialize(10)
        store.insert("HOST", "localhost")
        store.lookup("HOST")  # "localhost"
        store.reset()
    """

    def __init__(self, max_capacity: int | None = None):
        """
        Args:
            max_capacity: Optional upper bound on capacity; growth past it
                raises AllocationError
        """
        self._lock = threading.Lock()
        self._slots: list[Entry | None] | None = None
        self._count = 0
        self._capacity = 0
        self.max_capacity = max_capacity

    @property
    def initialized(self) -> bool:
        with self._lock:
            return self._slots is not None

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._capacity

    def initialize(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY) -> None:
        """
        Reserve storage for ``initial_capacity`` entries.

        No-op when the store is already initialized.

        Raises:
            ValueError: If initial_capacity is not positive
            AllocationError: If the storage cannot be reserved
        """
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")

        with self._lock:
            if self._slots is not None:
                return

            if self.max_capacity is not None and initial_capacity > self.max_capacity:
                raise AllocationError(
                    f"Cannot reserve {initial_capacity} entries: limit is {self.max_capacity}",
                    requested=initial_capacity,
                    capacity=0,
                )
            try:
                self._slots = [None] * initial_capacity
            except MemoryError as e:
                raise AllocationError(
                    f"Failed to allocate storage for {initial_capacity} entries",
                    requested=initial_capacity,
                    capacity=0,
                ) from e

            self._count = 0
            self._capacity = initial_capacity
            logger.debug(f"Store initialized with capacity {initial_capacity}")

    def insert(self, key: str, value: str) -> None:
        """
        Append an entry, doubling capacity first when the store is full.

        A failed growth leaves every existing entry untouched.

        Raises:
            StoreNotInitializedError: If initialize() has not been called
            AllocationError: If capacity cannot grow
        """
        entry = Entry(key=str(key), value=str(value))

        with self._lock:
            if self._slots is None:
                raise StoreNotInitializedError("Store is not initialized; call initialize() before insert()")

            if self._count >= self._capacity:
                self._grow()

            self._slots[self._count] = entry
            self._count += 1

    def _grow(self) -> None:
        """Double the capacity. Caller must hold the lock."""
        assert self._slots is not None
        new_capacity = self._capacity * 2

        if self.max_capacity is not None and new_capacity > self.max_capacity:
            raise AllocationError(
                f"Cannot grow store from {self._capacity} to {new_capacity} entries: limit is {self.max_capacity}",
                requested=new_capacity,
                capacity=self._capacity,
            )
        try:
            self._slots.extend([None] * (new_capacity - self._capacity))
        except MemoryError as e:
            raise AllocationError(
                f"Failed to grow store to {new_capacity} entries",
                requested=new_capacity,
                capacity=self._capacity,
            ) from e

        logger.debug(f"Store grown from {self._capacity} to {new_capacity}")
        self._capacity = new_capacity

    def lookup(self, key: str) -> str | None:
        """Return the value of the first entry whose key equals ``key``, or None."""
        with self._lock:
            for entry in self._iter_entries():
                if entry.key == key:
                    return entry.value
            return None

    def reset(self) -> None:
        """Drop all entries and return to the uninitialized state."""
        with self._lock:
            self._slots = None
            self._count = 0
            self._capacity = 0

    def entries(self) -> list[Entry]:
        """Snapshot of all entries in insertion order, duplicates included."""
        with self._lock:
            return list(self._iter_entries())

    def as_dict(self) -> dict[str, str]:
        """First-match value for every key, in first-insertion order."""
        result: dict[str, str] = {}
        for entry in self.entries():
            result.setdefault(entry.key, entry.value)
        return result

    def _iter_entries(self) -> Iterator[Entry]:
        """Iterate live entries. Caller must hold the lock."""
        if self._slots is None:
            return
        for index in range(self._count):
            entry = self._slots[index]
            assert entry is not None
            yield entry

    def __len__(self) -> int:
        with self._lock:
            return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.lookup(key) is not None

    def __repr__(self) -> str:
        return f"VariableStore(count={len(self)}, capacity={self.capacity})"

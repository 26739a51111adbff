"""Append-only arenas handing out integer handles.

Handles are indexes into the pool's storage. They increase monotonically and
are never reused; a handle is valid iff it is below the pool's current size.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from cella.errors import CellaCapacityExceeded, CellaOutOfBounds

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Pool(Generic[T]):
    """A fixed-capacity, append-only store of records."""

    __slots__ = ("name", "capacity", "_records")

    def __init__(self, name: str, capacity: int):
        self.name = name
        self.capacity = capacity
        self._records: list[T] = []

    def __len__(self) -> int:
        return len(self._records)

    def allocate(self, record: T) -> int:
        """Append `record` and return its handle.

        Raises CellaCapacityExceeded once the pool holds `capacity` records.
        """
        handle = len(self._records)
        if handle >= self.capacity:
            raise CellaCapacityExceeded(
                f"{self.name} pool exhausted ({self.capacity} records)"
            )
        self._records.append(record)
        return handle

    def lookup(self, handle: int) -> T:
        if handle < 0 or handle >= len(self._records):
            raise CellaOutOfBounds(f"{self.name} index '{handle}' out of bounds!")
        return self._records[handle]

    def __repr__(self):
        return f"<Pool {self.name}: {len(self)}/{self.capacity}>"


class SymbolPool(Pool[str]):
    """Pool of symbol texts with interning."""

    __slots__ = ("scans",)

    def __init__(self, name: str, capacity: int):
        super().__init__(name, capacity)
        # Total entries compared by intern(); linear in the table size per call
        self.scans = 0

    def intern(self, text: str) -> int:
        """Return the handle for `text`, allocating it on first use."""
        for handle, existing in enumerate(self._records):
            self.scans += 1
            if existing == text:
                return handle
        handle = self.allocate(text)
        logger.debug("interned symbol %r as %d", text, handle)
        return handle

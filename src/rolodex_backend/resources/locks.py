"""Per-record write serialization."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass(slots=True)
class _RecordLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class RecordLockRegistry:
    """Hands out one lock per ``(collection, record id)`` pair.

    Entries only live while some writer holds or waits for them, so ids that
    never resolve to a record do not accumulate.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[tuple[str, str], _RecordLock] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, collection: str, record_id: str) -> Iterator[None]:
        """Hold the record's lock for the duration of the block."""
        key = (collection, record_id)
        with self._guard:
            entry = self._locks.setdefault(key, _RecordLock())
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]


__all__ = ["RecordLockRegistry"]

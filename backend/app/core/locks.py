from __future__ import annotations

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Hashable, Iterator

from app.core.config import settings
from app.core.exceptions import StorageUnavailable

log = logging.getLogger("playmate.locks")


class _KeyLock:
    __slots__ = ("lock", "__weakref__")

    def __init__(self) -> None:
        self.lock = threading.Lock()


class KeyedLocks:
    """Process-wide mutexes addressed by key, e.g. ("field", 7).

    Entries disappear once no thread holds or waits on them.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary[Hashable, _KeyLock] = weakref.WeakValueDictionary()

    def _get(self, key: Hashable) -> _KeyLock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = _KeyLock()
                self._locks[key] = entry
            return entry

    @contextmanager
    def hold(self, key: Hashable, timeout: float | None = None) -> Iterator[None]:
        entry = self._get(key)
        wait = settings.LOCK_TIMEOUT_SECONDS if timeout is None else timeout
        if not entry.lock.acquire(timeout=wait):
            log.warning("lock timeout key=%s after %.1fs", key, wait)
            raise StorageUnavailable("Resource is busy, try again", details={"key": repr(key)})
        try:
            yield
        finally:
            entry.lock.release()

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


locks = KeyedLocks()


def field_key(field_id: int) -> tuple[str, int]:
    return ("field", field_id)


def membership_key(booking_id: int, user_id: int) -> tuple[str, int, int]:
    return ("membership", booking_id, user_id)

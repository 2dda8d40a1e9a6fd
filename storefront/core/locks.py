# storefront/core/locks.py
import threading
from contextlib import contextmanager
from typing import Hashable, Iterator

from storefront.core.errors import Conflict


class KeyedLocks:
    """
    Registry of one mutex per key (here: per user id).

    Mutations for the same key run one at a time; different keys never
    contend. Acquisition is bounded so a stuck writer cannot block a
    request forever.

    An entry only lives while someone holds or waits for it, so the
    registry does not grow with the number of users seen.
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self._guard = threading.Lock()
        # key -> [lock, holders + waiters]
        self._locks: dict[Hashable, list] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _checkout(self, key: Hashable) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
            return entry[0]

    def _checkin(self, key: Hashable) -> None:
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        """
        Hold the lock for `key` for the duration of the block.

        Raises:
            Conflict: if the lock was not acquired within `timeout`.
        """
        lock = self._checkout(key)
        try:
            if not lock.acquire(timeout=self.timeout):
                raise Conflict("Another update to this cart is in progress, please retry")
            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(key)

"""Thread-safe memoisation used by the converter."""
from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

__all__ = [
    "CacheInfo",
    "DateCache",
]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class CacheInfo:
    hits: int
    misses: int
    size: int
    maxsize: Optional[int]


class DateCache(Generic[K, V]):
    """Insert-if-absent mapping guarded by a single lock.

    ``maxsize=None`` keeps every entry for the life of the cache. A positive
    ``maxsize`` evicts the least recently used entry once the cache is full.
    Stored values may be ``None``.
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and maxsize <= 0:
            raise ValueError("maxsize must be a positive integer or None")
        self.maxsize = maxsize
        self._entries: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        """Return the cached value for ``key``, computing and storing it on a miss.

        ``compute`` runs under the lock, so concurrent callers asking for the
        same key see exactly one computation.
        """

        with self._lock:
            if key in self._entries:
                self._hits += 1
                if self.maxsize is not None:
                    self._entries.move_to_end(key)
                return self._entries[key]

            self._misses += 1
            value = compute()
            self._entries[key] = value
            if self.maxsize is not None and len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
            return value

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._entries), self.maxsize)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

"""Key/value cache with per-entry expiry."""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict


@dataclass
class CacheEntry:
    data: Any
    expires_at: float


class TTLCache:
    """
    In-memory cache with lazy expiry.

    Entries are only purged when looked up or overwritten; there is no
    background sweep and no size bound. Not thread-safe: one owner per
    process, used from the event loop.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value, or ``default`` if absent or expired."""
        entry = self._store.get(key)
        if entry is None:
            return default
        if self._clock() > entry.expires_at:
            del self._store[key]
            return default
        return entry.data

    def set(self, key: str, value: Any, ttl: float):
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        self._store[key] = CacheEntry(data=value, expires_at=self._clock() + ttl)

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return len(self._store)


_MISSING = object()

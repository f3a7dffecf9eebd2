"""Thread-safe in-memory cache for weather lookups, keyed by location."""

import logging
import threading
import time
from dataclasses import dataclass

from config import MAX_AGE_MS

log = logging.getLogger(__name__)


def _now_ms():
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    """Records for one location and the wall-clock ms at which they were stored."""

    records: tuple
    stored_at: int

    def is_expired(self, now, max_age):
        # An entry exactly max_age old is still fresh.
        return now - max_age > self.stored_at


class WeatherCache:
    """Read-through cache of weather results per location.

    Entries expire lazily: an expired entry is only removed when ``get`` is
    called for its key (or when ``purge_expired`` runs). A single lock
    serializes every operation across all keys.
    """

    def __init__(self, max_age_ms=MAX_AGE_MS, clock=None):
        self._lock = threading.Lock()
        self._max_age = max_age_ms
        self._clock = clock or _now_ms
        self._entries = {}    # location -> CacheEntry

    def get(self, location):
        """Return the cached records for ``location``, or None on a miss."""
        if not location:
            return None
        with self._lock:
            entry = self._entries.get(location)
            log.debug("Location %s%s found in cache", location, "" if entry else " not")
            if entry is None:
                return None
            if entry.is_expired(self._clock(), self._max_age):
                log.debug("Location %s has aged out of cache", location)
                del self._entries[location]
                return None
            return list(entry.records)

    def put(self, location, records):
        """Store ``records`` for ``location``, overwriting any earlier entry."""
        records = tuple(records)
        with self._lock:
            self._entries[location] = CacheEntry(records=records, stored_at=self._clock())

    def age(self, location):
        """Return ms since ``location`` was stored, or None if not held."""
        with self._lock:
            entry = self._entries.get(location)
            if entry is None:
                return None
            return self._clock() - entry.stored_at

    def purge_expired(self):
        """Drop every expired entry. Returns the number removed."""
        with self._lock:
            now = self._clock()
            stale = [k for k, e in self._entries.items() if e.is_expired(now, self._max_age)]
            for key in stale:
                del self._entries[key]
        if stale:
            log.info("Purged %d expired cache entries", len(stale))
        return len(stale)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self):
        with self._lock:
            return len(self._entries)

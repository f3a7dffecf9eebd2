"""Sync and async weather lookup services sharing one read-through cache."""

import logging
from concurrent.futures import ThreadPoolExecutor

from config import ASYNC_WORKERS
from data_sources.openweathermap import fetch_weather

log = logging.getLogger(__name__)


def lookup(cache, fetch, location):
    """Cache first; on a miss fetch and store non-empty results.

    Failed or empty fetches are never cached.
    """
    results = cache.get(location)
    if results is not None:
        return results
    if not location:
        return []
    results = fetch(location) or []
    if results:
        cache.put(location, results)
    return results


class WeatherServiceSync:
    """Two-way lookup: blocks until the results are available."""

    def __init__(self, cache, fetch=fetch_weather):
        self._cache = cache
        self._fetch = fetch

    def get_current_weather(self, location):
        log.debug("get_current_weather %r (sync)", location)
        results = lookup(self._cache, self._fetch, location)
        log.debug("WeatherData results = %s", results)
        return results


class WeatherServiceAsync:
    """One-way lookup: runs off the caller's thread, delivers to a callback."""

    def __init__(self, cache, fetch=fetch_weather, max_workers=ASYNC_WORKERS):
        self._cache = cache
        self._fetch = fetch
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="weather-async")

    def get_current_weather(self, location, callback):
        """Schedule a lookup; ``callback(results)`` is called with the list.

        Returns the Future of the lookup itself.
        """
        log.debug("get_current_weather %r (async)", location)
        return self._executor.submit(self._run, location, callback)

    def _run(self, location, callback):
        results = lookup(self._cache, self._fetch, location)
        log.debug("WeatherData results = %s", results)
        try:
            callback(results)
        except Exception:
            log.exception("Result callback failed for %s", location)
        return results

    def shutdown(self, wait=True):
        self._executor.shutdown(wait=wait)

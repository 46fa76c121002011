"""Time-bounded, single-flight cache in front of the ACE feed service."""

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3.0

Records = Tuple[Any, ...]


class FeedCache:
    """
    Caches whole feed snapshots by name and coalesces concurrent fetches.

    A snapshot is valid for ``ttl`` seconds counted from the moment its fetch
    completed. While a fetch for a name is running, every caller asking for
    that name gets the same pending future. Failed fetches are not cached.
    """

    def __init__(
        self,
        fetch: Callable[[str], Iterable[Any]],
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_workers: int = 4,
    ):
        """
        Initialize the cache.

        Args:
            fetch: Upstream callable taking a feed name and returning its records.
            ttl: Seconds a completed snapshot stays valid.
            clock: Monotonic time source, injectable for tests.
            max_workers: Size of the pool running upstream fetches.
        """
        self._fetch = fetch
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[Records, float]] = {}  # name -> (records, completed_at)
        self._in_flight: Dict[str, Future] = {}
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="feed-cache")

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, feed_name: str) -> Future:
        """
        Return a future resolving to the records of ``feed_name``.

        The future is already resolved on a cache hit. On a miss exactly one
        upstream fetch is started; its failure surfaces as UpstreamFetchError
        to every caller sharing the future.
        """
        with self._lock:
            entry = self._entries.get(feed_name)
            if entry is not None:
                records, completed_at = entry
                if self._clock() - completed_at < self._ttl:
                    logger.debug(f"Using cached data for {feed_name}")
                    return self._resolved(records)
                del self._entries[feed_name]
                logger.debug(f"Cached data for {feed_name} expired")

            pending = self._in_flight.get(feed_name)
            if pending is not None:
                logger.debug(f"Joining in-flight fetch for {feed_name}")
                return pending

            logger.debug(f"Fetching {feed_name}")
            future = self._executor.submit(self._run_fetch, feed_name)
            self._in_flight[feed_name] = future
            return future

    def load(self, feed_name: str) -> Records:
        """Block until the records of ``feed_name`` are available."""
        return self.get(feed_name).result()

    def clear(self) -> None:
        """Drop every cached snapshot. In-flight fetches are left running."""
        with self._lock:
            self._entries.clear()

    def shutdown(self, wait: bool = True) -> None:
        """Stop the fetch worker pool."""
        self._executor.shutdown(wait=wait)

    def _run_fetch(self, feed_name: str) -> Records:
        # Runs on the pool; state is published before the future resolves
        try:
            records = tuple(self._fetch(feed_name))
        except Exception as e:
            with self._lock:
                self._in_flight.pop(feed_name, None)
            logger.error(f"Failed to fetch {feed_name}: {e}")
            if isinstance(e, UpstreamFetchError):
                raise
            raise UpstreamFetchError(f"Failed to fetch {feed_name}: {e}") from e

        with self._lock:
            self._entries[feed_name] = (records, self._clock())
            self._in_flight.pop(feed_name, None)
        logger.debug(f"Cached {len(records)} records for {feed_name}")
        return records

    @staticmethod
    def _resolved(records: Records) -> Future:
        future: Future = Future()
        future.set_result(records)
        return future

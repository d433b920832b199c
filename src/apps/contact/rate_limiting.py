"""
Fixed-window, per-client-address request counter.

Each client address gets a counter and a window start. The counter resets
when the window has elapsed and otherwise increments; requests beyond
``max_requests`` within one window are rejected. A client can therefore land
up to ``2 * max_requests`` requests across a window boundary.

The map is process-local and guarded by a lock so concurrent requests from
the same address cannot undercount. Stale entries are swept every
``sweep_interval`` checks, and the map never holds more than ``max_entries``
addresses (the entries with the oldest windows are evicted first).
"""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 15 * 60  # seconds
DEFAULT_MAX_REQUESTS = 5
DEFAULT_MAX_ENTRIES = 10_000
DEFAULT_SWEEP_INTERVAL = 100


@dataclass
class RateLimitRecord:
    """Request history of one client address within the current window."""

    count: int
    window_start: float


class FixedWindowRateLimiter:
    """Thread-safe fixed-window rate limiter keyed by client address."""

    def __init__(
        self,
        *,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window: float = DEFAULT_WINDOW,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        sweep_interval: int = DEFAULT_SWEEP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window = window
        self.max_entries = max_entries
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._lock = threading.Lock()
        self._records: dict[str, RateLimitRecord] = {}
        self._checks_since_sweep = 0

    def check(self, client_address: str) -> bool:
        """Count a request from ``client_address`` and return whether it is allowed."""
        now = self._clock()
        with self._lock:
            self._checks_since_sweep += 1
            if self._checks_since_sweep >= self.sweep_interval:
                self._checks_since_sweep = 0
                self._sweep(now)

            record = self._records.get(client_address)
            if record is None:
                if len(self._records) >= self.max_entries:
                    self._evict_oldest()
                self._records[client_address] = RateLimitRecord(count=1, window_start=now)
                return True

            if now - record.window_start > self.window:
                record.count = 1
                record.window_start = now
                return True

            record.count += 1
            return record.count <= self.max_requests

    def get_record(self, client_address: str) -> RateLimitRecord | None:
        """Return a copy of the current record for ``client_address``, if any."""
        with self._lock:
            record = self._records.get(client_address)
            if record is None:
                return None
            return RateLimitRecord(count=record.count, window_start=record.window_start)

    def reset(self) -> None:
        """Forget every client address."""
        with self._lock:
            self._records.clear()
            self._checks_since_sweep = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _sweep(self, now: float) -> None:
        expired = [addr for addr, rec in self._records.items() if now - rec.window_start > self.window]
        for addr in expired:
            del self._records[addr]
        if expired:
            logger.debug("Swept %d expired rate limit entries", len(expired))

    def _evict_oldest(self) -> None:
        # Oldest tenth of the table, at least one entry
        excess = max(1, self.max_entries // 10)
        oldest = sorted(self._records.items(), key=lambda item: item[1].window_start)[:excess]
        for addr, _ in oldest:
            del self._records[addr]
        logger.warning("Rate limit table full, evicted %d entries", len(oldest))

"""Unit tests for the fixed-window rate limiter."""

import threading

from apps.contact.rate_limiting import FixedWindowRateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_limiter(clock: FakeClock, **kwargs) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(max_requests=5, window=15 * 60, clock=clock, **kwargs)


class TestFixedWindowRateLimiter:
    """Tests for FixedWindowRateLimiter."""

    def test_five_allowed_sixth_rejected(self) -> None:
        limiter = make_limiter(FakeClock())
        results = [limiter.check("203.0.113.7") for _ in range(6)]
        assert results == [True, True, True, True, True, False]

    def test_window_expiry_resets_count(self) -> None:
        clock = FakeClock()
        limiter = make_limiter(clock)
        for _ in range(6):
            limiter.check("203.0.113.7")
        clock.advance(15 * 60 + 1)
        assert limiter.check("203.0.113.7") is True
        assert limiter.get_record("203.0.113.7").count == 1

    def test_window_boundary_is_inclusive(self) -> None:
        clock = FakeClock()
        limiter = make_limiter(clock)
        for _ in range(5):
            limiter.check("203.0.113.7")
        clock.advance(15 * 60)
        assert limiter.check("203.0.113.7") is False

    def test_addresses_are_counted_separately(self) -> None:
        limiter = make_limiter(FakeClock())
        for _ in range(5):
            limiter.check("203.0.113.7")
        assert limiter.check("203.0.113.7") is False
        assert limiter.check("198.51.100.2") is True

    def test_rejected_requests_keep_counting(self) -> None:
        limiter = make_limiter(FakeClock())
        for _ in range(8):
            limiter.check("203.0.113.7")
        assert limiter.get_record("203.0.113.7").count == 8

    def test_burst_across_window_boundary(self) -> None:
        clock = FakeClock()
        limiter = make_limiter(clock)
        clock.advance(1)
        first = [limiter.check("203.0.113.7") for _ in range(5)]
        clock.advance(15 * 60 + 1)
        second = [limiter.check("203.0.113.7") for _ in range(5)]
        assert all(first) and all(second)

    def test_sweep_removes_expired_entries(self) -> None:
        clock = FakeClock()
        limiter = make_limiter(clock, sweep_interval=3)
        limiter.check("a")
        limiter.check("b")
        clock.advance(15 * 60 + 1)
        limiter.check("c")  # third check triggers the sweep
        assert limiter.get_record("a") is None
        assert limiter.get_record("b") is None
        assert len(limiter) == 1

    def test_table_is_bounded(self) -> None:
        clock = FakeClock()
        limiter = make_limiter(clock, max_entries=10)
        for i in range(25):
            clock.advance(1)
            limiter.check(f"10.0.0.{i}")
        assert len(limiter) <= 10
        assert limiter.get_record("10.0.0.0") is None
        assert limiter.get_record("10.0.0.24") is not None

    def test_reset(self) -> None:
        limiter = make_limiter(FakeClock())
        for _ in range(6):
            limiter.check("203.0.113.7")
        limiter.reset()
        assert limiter.check("203.0.113.7") is True

    def test_concurrent_checks_do_not_undercount(self) -> None:
        limiter = FixedWindowRateLimiter(max_requests=50, window=60)
        allowed = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(20):
                ok = limiter.check("203.0.113.7")
                with lock:
                    allowed.append(ok)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert limiter.get_record("203.0.113.7").count == 200
        assert allowed.count(True) == 50

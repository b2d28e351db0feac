"""Unit tests for app.services.rate_limit.SlidingWindowRateLimiter."""

import unittest

from app.services.rate_limit import SlidingWindowRateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestSlidingWindowRateLimiter(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.limiter = SlidingWindowRateLimiter(limit=3, window_seconds=180, clock=self.clock)

    def test_allows_up_to_limit(self) -> None:
        self.assertEqual([self.limiter.hit("1.2.3.4") for _ in range(4)], [True, True, True, False])

    def test_keys_are_independent(self) -> None:
        for _ in range(3):
            self.limiter.hit("1.2.3.4")
        self.assertFalse(self.limiter.hit("1.2.3.4"))
        self.assertTrue(self.limiter.hit("5.6.7.8"))

    def test_window_slides(self) -> None:
        for _ in range(3):
            self.limiter.hit("k")
        self.clock.now += 179
        self.assertFalse(self.limiter.hit("k"))
        self.clock.now += 1
        self.assertTrue(self.limiter.hit("k"))

    def test_reset(self) -> None:
        for _ in range(3):
            self.limiter.hit("k")
        self.limiter.reset()
        self.assertTrue(self.limiter.hit("k"))

    def test_idle_keys_are_dropped(self) -> None:
        for i in range(1000):
            self.limiter.hit(f"10.0.{i // 256}.{i % 256}")
        self.assertEqual(self.limiter.tracked_keys(), 1000)
        self.clock.now += 181
        self.assertTrue(self.limiter.hit("192.168.0.1"))
        self.assertEqual(self.limiter.tracked_keys(), 1)

    def test_sweep_keeps_keys_active_in_window(self) -> None:
        self.limiter.hit("old")
        self.clock.now += 100
        for _ in range(3):
            self.limiter.hit("busy")
        self.clock.now += 100
        self.limiter.hit("new")
        self.assertEqual(self.limiter.tracked_keys(), 2)
        self.assertFalse(self.limiter.hit("busy"))

    def test_zero_limit_disables(self) -> None:
        limiter = SlidingWindowRateLimiter(limit=0, window_seconds=1, clock=self.clock)
        self.assertTrue(all(limiter.hit("k") for _ in range(100)))


if __name__ == "__main__":
    unittest.main()

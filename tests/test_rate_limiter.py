from privachat.services.rate_limiter import FixedWindowRateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_allows_up_to_limit_then_blocks():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    assert limiter.hit("10.0.0.1")
    assert limiter.hit("10.0.0.1")
    assert not limiter.hit("10.0.0.1")
    assert limiter.hit("10.0.0.2")


def test_window_resets():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)

    assert limiter.hit("a")
    assert not limiter.hit("a")
    clock.now += 30
    assert limiter.retry_after("a") == 30
    clock.now += 30
    assert limiter.hit("a")


def test_retry_after_unknown_key():
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)
    assert limiter.retry_after("never-seen") == 0

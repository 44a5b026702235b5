from latencykit.rate_limiter import TokenBucket


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_burst_then_limited():
    clock = FakeClock()
    bucket = TokenBucket(2.0, 5.0, clock=clock)
    results = [bucket.try_consume() for _ in range(6)]
    assert results == [True] * 5 + [False]


def test_refills_over_time():
    clock = FakeClock()
    bucket = TokenBucket(2.0, 5.0, clock=clock)
    for _ in range(5):
        bucket.try_consume()
    assert not bucket.try_consume()
    clock.now += 0.5
    assert bucket.try_consume()
    assert not bucket.try_consume()


def test_refill_is_capped_at_burst():
    clock = FakeClock()
    bucket = TokenBucket(2.0, 5.0, clock=clock)
    bucket.try_consume()
    clock.now += 1000.0
    bucket.refill()
    assert bucket.tokens == 5.0


def test_partial_token_not_enough():
    clock = FakeClock()
    bucket = TokenBucket(1.0, 1.0, clock=clock)
    assert bucket.try_consume()
    clock.now += 0.5
    assert not bucket.try_consume()
    clock.now += 0.5
    assert bucket.try_consume()


def test_effectively_unlimited_bucket_accepts_all():
    bucket = TokenBucket(1e9, 1e9)
    accepted = sum(bucket.try_consume() for _ in range(10_000))
    assert accepted == 10_000


def test_tokens_never_exceed_capacity_or_go_negative():
    clock = FakeClock()
    bucket = TokenBucket(3.0, 4.0, clock=clock)
    for step in range(50):
        clock.now += 0.1
        bucket.try_consume()
        assert 0.0 <= bucket.tokens <= 4.0
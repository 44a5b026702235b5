import random

import pytest

from latencykit.hotloop import main, sum_cache_friendly, sum_naive


@pytest.mark.parametrize("n", [0, 1, 10, 1000])
def test_sums_of_iota_agree_with_formula(n):
    expected = n * (n - 1) // 2
    assert sum_naive(range(n)) == expected
    assert sum_cache_friendly(range(n)) == expected


def test_strategies_agree_on_random_data():
    rng = random.Random(11)
    values = [rng.randrange(1 << 32) for _ in range(500)]
    assert sum_naive(values) == sum_cache_friendly(values)


def test_sum_wraps_at_64_bits():
    big = (1 << 32) - 1
    count = (1 << 33) // 1  # enough to exceed 2**64 when scaled below
    values = [big] * 3
    assert sum_naive(values) == 3 * big
    huge = [1 << 63, 1 << 63, 5]
    assert sum_naive(huge) == 5
    assert sum_cache_friendly(huge) == 5
    assert count > 0


def test_main_reports_benchmark(capsys):
    assert main(["--count", "1000"]) == 0
    out = capsys.readouterr().out
    assert "naive:" in out
    assert f"result {999 * 1000 // 2}" in out
    assert "Benchmark: 1000 elements" in out
import pytest

from latencykit.batch_ring import (
    SPSCRing,
    main,
    measure,
    run_double_ring_fixed,
    run_single_ring_bump,
)


@pytest.mark.parametrize("capacity", [0, 1, 3, 6, 100])
def test_capacity_must_be_power_of_two(capacity):
    with pytest.raises(ValueError):
        SPSCRing(capacity)


def test_holds_capacity_minus_one():
    ring = SPSCRing(8)
    results = [ring.push(i) for i in range(8)]
    assert results.count(True) == ring.capacity - 1
    assert results[-1] is False


def test_fifo_order():
    ring = SPSCRing(16)
    for i in range(10):
        assert ring.push(i)
    assert [ring.pop() for _ in range(10)] == list(range(10))


def test_pop_empty_raises():
    ring = SPSCRing(4)
    with pytest.raises(IndexError):
        ring.pop()


def test_push_batch_partial():
    ring = SPSCRing(4)
    values = ["a", "b", "c", "d", "e"]
    pushed = ring.push_batch(values)
    assert pushed == ring.capacity - 1
    assert ring.pop_batch(10) == values[:pushed]


def test_pop_batch_limits_and_empty():
    ring = SPSCRing(16)
    ring.push_batch(range(10))
    assert ring.pop_batch(4) == [0, 1, 2, 3]
    assert ring.pop_batch(100) == [4, 5, 6, 7, 8, 9]
    assert ring.pop_batch(5) == []


def test_pop_batch_negative_raises():
    with pytest.raises(ValueError):
        SPSCRing(4).pop_batch(-1)


def test_wraparound_keeps_order():
    ring = SPSCRing(4)
    out = []
    for i in range(30):
        assert ring.push(i)
        if i % 2:
            out.extend(ring.pop_batch(2))
    out.extend(ring.pop_batch(10))
    assert out == list(range(30))


@pytest.mark.parametrize("batch", [False, True])
def test_single_ring_processes_items(batch):
    assert run_single_ring_bump(batch, 0.2) > 0


@pytest.mark.parametrize("batch", [False, True])
def test_double_ring_processes_items(batch):
    assert run_double_ring_fixed(batch, 0.2) > 0


def test_negative_duration_raises():
    with pytest.raises(ValueError):
        run_single_ring_bump(False, -1.0)
    with pytest.raises(ValueError):
        run_double_ring_fixed(True, -1.0)


def test_measure_reports_and_returns(capsys):
    processed, seconds = measure(lambda: 5, "demo")
    assert processed == 5
    assert seconds >= 0
    assert "demo: processed 5 objects" in capsys.readouterr().out


def test_main_runs_all_sections(capsys):
    assert main(["--duration", "0.05"]) == 0
    out = capsys.readouterr().out
    assert "Double Ring + Fixed Array (batch)" in out
    assert "Demo complete." in out
from itertools import accumulate

import pytest

from osalgo.cpu_scheduling import Process, RoundRobinResult, fcfs, priority, round_robin


def test_fcfs_orders_by_arrival_stably():
    procs = [Process(1, 3, 5), Process(2, 4, 0), Process(3, 2, 5), Process(4, 1, 2)]
    rows = fcfs(procs)
    expected = [p.pid for p in sorted(procs, key=lambda p: p.arrival)]
    assert [r.pid for r in rows] == expected


def test_fcfs_time_relations():
    procs = [Process(1, 3, 5), Process(2, 4, 0), Process(3, 2, 5), Process(4, 1, 2)]
    for row in fcfs(procs):
        assert row.turnaround == row.completion - row.process.arrival
        assert row.waiting == row.turnaround - row.process.burst
        assert row.waiting >= 0


def test_fcfs_idle_gap():
    late = Process(2, 3, 100)
    rows = fcfs([Process(1, 2, 0), late])
    assert rows[1].completion == late.arrival + late.burst
    assert rows[1].waiting == 0


def test_fcfs_all_at_zero_accumulates():
    bursts = [5, 1, 7, 3]
    rows = fcfs([Process(i, b) for i, b in enumerate(bursts)])
    assert [r.completion for r in rows] == list(accumulate(bursts))


def test_fcfs_empty():
    assert fcfs([]) == []


def test_priority_order_and_waits():
    procs = [Process(1, 10, priority=3), Process(2, 1, priority=1),
             Process(3, 2, priority=3), Process(4, 5, priority=2)]
    rows = priority(procs)
    assert [r.pid for r in rows] == [p.pid for p in sorted(procs, key=lambda p: p.priority)]
    assert rows[0].waiting == 0
    for before, after in zip(rows, rows[1:]):
        assert after.waiting == before.turnaround
    assert rows[-1].turnaround == sum(p.burst for p in procs)


def test_round_robin_textbook():
    result = round_robin([Process(1, 24), Process(2, 3), Process(3, 3)], 4)
    assert result.total_waiting == 17
    assert result.average_waiting == result.total_waiting / 3


def test_round_robin_turnaround_minus_waiting_is_burst_sum():
    procs = [Process(1, 5, 0), Process(2, 3, 1), Process(3, 8, 2), Process(4, 6, 3)]
    result = round_robin(procs, 2)
    assert result.total_turnaround - result.total_waiting == sum(p.burst for p in procs)
    assert result.process_count == len(procs)


def test_round_robin_large_slice_matches_fcfs():
    procs = [Process(1, 5), Process(2, 3), Process(3, 8)]
    result = round_robin(procs, max(p.burst for p in procs))
    rows = fcfs(procs)
    assert result.total_waiting == sum(r.waiting for r in rows)
    assert result.total_turnaround == sum(r.turnaround for r in rows)


def test_round_robin_waits_for_late_arrival():
    procs = [Process(1, 2, 0), Process(2, 3, 10)]
    result = round_robin(procs, 2)
    assert result.total_waiting == 0
    assert result.total_turnaround == sum(p.burst for p in procs)


def test_round_robin_averages():
    result = RoundRobinResult(total_waiting=9, total_turnaround=21, process_count=3)
    assert result.average_waiting == 9 / 3
    assert result.average_turnaround == 21 / 3


@pytest.mark.parametrize("time_slice", [0, -2])
def test_round_robin_bad_slice(time_slice):
    with pytest.raises(ValueError):
        round_robin([Process(1, 3)], time_slice)


def test_round_robin_zero_burst():
    with pytest.raises(ValueError):
        round_robin([Process(1, 0)], 2)


def test_round_robin_no_processes():
    with pytest.raises(ValueError):
        round_robin([], 2)
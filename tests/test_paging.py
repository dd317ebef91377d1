import pytest

from osalgo.paging import PageStep, count_page_faults, fifo_page_replacement

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_belady_anomaly_three_frames():
    assert count_page_faults(fifo_page_replacement(BELADY, 3)) == 9


def test_belady_anomaly_four_frames():
    assert count_page_faults(fifo_page_replacement(BELADY, 4)) == 10


def test_one_step_per_reference():
    steps = fifo_page_replacement(BELADY, 3)
    assert [s.page for s in steps] == BELADY
    assert all(len(s.frames) == 3 for s in steps)


def test_first_step_fills_first_frame():
    steps = fifo_page_replacement([7, 0, 1], 3)
    assert steps[0] == PageStep(7, (7, None, None), True, 1)


def test_fault_numbers_are_sequential():
    steps = fifo_page_replacement(BELADY, 3)
    numbers = [s.fault_number for s in steps if s.fault]
    assert numbers == list(range(1, len(numbers) + 1))
    assert all(s.fault_number is None for s in steps if not s.fault)


def test_hit_means_page_already_resident():
    steps = fifo_page_replacement(BELADY, 3)
    previous = (None, None, None)
    for step in steps:
        if not step.fault:
            assert step.page in previous
            assert step.frames == previous
        else:
            assert step.page not in previous
            assert step.page in step.frames
        previous = step.frames


def test_oldest_page_is_evicted():
    steps = fifo_page_replacement([1, 2, 3], 2)
    assert steps[-1].frames == (3, 2)


@pytest.mark.parametrize("reference", [[4, 4, 4], [1, 2, 1, 2, 3], [9, 8, 7, 6]])
def test_enough_frames_only_cold_misses(reference):
    steps = fifo_page_replacement(reference, len(set(reference)))
    assert count_page_faults(steps) == len(set(reference))


def test_fault_bounds():
    faults = count_page_faults(fifo_page_replacement(BELADY, 2))
    assert len(set(BELADY)) <= faults <= len(BELADY)


def test_empty_reference():
    assert fifo_page_replacement([], 3) == []


@pytest.mark.parametrize("frames", [0, -1])
def test_invalid_frame_count(frames):
    with pytest.raises(ValueError):
        fifo_page_replacement([1, 2], frames)
"""SCAN and C-SCAN disk head scheduling."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from enum import IntEnum


class Direction(IntEnum):
    """Direction the head starts moving in."""

    LOW = 0
    HIGH = 1


def _split(requests: Iterable[int], head: int, disk_size: int) -> tuple[list[int], list[int]]:
    if disk_size < 1:
        raise ValueError("disk size must be at least 1")
    ordered = sorted(requests)
    for cylinder in (*ordered, head):
        if not 0 <= cylinder < disk_size:
            raise ValueError(f"cylinder {cylinder} is outside the disk")
    cut = bisect_right(ordered, head)
    return ordered[:cut], ordered[cut:]


def _travel(start: int, stops: Iterable[int]) -> int:
    total = 0
    position = start
    for stop in stops:
        total += abs(stop - position)
        position = stop
    return total


def scan(requests: Iterable[int], head: int, disk_size: int, direction: Direction | int) -> int:
    """Total head movement of the elevator algorithm.

    The head sweeps to the end of the disk in ``direction`` and then reverses.
    Requests at the head's position count as lying below it.
    """
    lower, upper = _split(requests, head, disk_size)
    if Direction(direction) is Direction.HIGH:
        path = [*upper, disk_size - 1, *reversed(lower)]
    else:
        path = [*reversed(lower), 0, *upper]
    return _travel(head, path)


def c_scan(requests: Iterable[int], head: int, disk_size: int, direction: Direction | int) -> int:
    """Total head movement of circular SCAN.

    The head sweeps to the end of the disk in ``direction``, jumps to the
    other end (the jump counts as ``disk_size - 1``) and keeps the direction.
    """
    lower, upper = _split(requests, head, disk_size)
    last = disk_size - 1
    if Direction(direction) is Direction.HIGH:
        return _travel(head, [*upper, last]) + last + _travel(0, lower)
    return _travel(head, [*reversed(lower), 0]) + last + _travel(last, reversed(upper))
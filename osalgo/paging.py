"""FIFO page replacement."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PageStep:
    """Frame contents after one page reference has been served.

    Empty frames are ``None``. ``fault_number`` is the running count of
    page faults and is set only on steps that faulted.
    """

    page: int
    frames: tuple[int | None, ...]
    fault: bool
    fault_number: int | None = None


def fifo_page_replacement(reference: Iterable[int], frames: int) -> list[PageStep]:
    """Serve each page of ``reference`` with ``frames`` frames, evicting first-in first."""
    if frames < 1:
        raise ValueError("the number of frames must be at least 1")
    memory: list[int | None] = [None] * frames
    victim = 0
    faults = 0
    steps: list[PageStep] = []
    for page in reference:
        if page in memory:
            steps.append(PageStep(page, tuple(memory), False))
            continue
        memory[victim] = page
        victim = (victim + 1) % frames
        faults += 1
        steps.append(PageStep(page, tuple(memory), True, faults))
    return steps


def count_page_faults(steps: Sequence[PageStep]) -> int:
    """Return how many of ``steps`` caused a page fault."""
    return sum(1 for step in steps if step.fault)
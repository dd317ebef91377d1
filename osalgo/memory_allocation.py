"""Contiguous memory allocation with first, best and worst fit."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Strategy(Enum):
    """How a block is chosen among those large enough for a process."""

    FIRST = "first"
    BEST = "best"
    WORST = "worst"


def allocate(
    process_sizes: Iterable[int],
    block_sizes: Iterable[int],
    strategy: Strategy | str,
) -> list[int | None]:
    """Place each process in a block, in order.

    Returns, for each process, the zero-based index of its block or ``None``
    when no block had room. A block's free space shrinks by every process
    placed in it. Ties go to the lowest index.
    """
    strategy = Strategy(strategy)
    free = list(block_sizes)
    allocation: list[int | None] = []
    for size in process_sizes:
        candidates = [index for index, room in enumerate(free) if size <= room]
        if not candidates:
            allocation.append(None)
            continue
        if strategy is Strategy.FIRST:
            choice = candidates[0]
        elif strategy is Strategy.BEST:
            choice = min(candidates, key=free.__getitem__)
        else:
            choice = max(candidates, key=free.__getitem__)
        free[choice] -= size
        allocation.append(choice)
    return allocation


def first_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> list[int | None]:
    """Place each process in the first block with room."""
    return allocate(process_sizes, block_sizes, Strategy.FIRST)


def best_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> list[int | None]:
    """Place each process in the smallest block with room."""
    return allocate(process_sizes, block_sizes, Strategy.BEST)


def worst_fit(process_sizes: Iterable[int], block_sizes: Iterable[int]) -> list[int | None]:
    """Place each process in the largest block with room."""
    return allocate(process_sizes, block_sizes, Strategy.WORST)
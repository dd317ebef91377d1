"""Non-preemptive FCFS and priority scheduling, and round robin."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A job to schedule. Lower ``priority`` numbers run first."""

    pid: int
    burst: int
    arrival: int = 0
    priority: int = 0


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times the schedule gave it."""

    process: Process
    completion: int
    turnaround: int
    waiting: int

    @property
    def pid(self) -> int:
        return self.process.pid


@dataclass(frozen=True)
class RoundRobinResult:
    """Totals and averages of a round-robin run."""

    total_waiting: int
    total_turnaround: int
    process_count: int

    @property
    def average_waiting(self) -> float:
        return self.total_waiting / self.process_count

    @property
    def average_turnaround(self) -> float:
        return self.total_turnaround / self.process_count


def fcfs(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Run processes in order of arrival; the CPU idles until a late arrival."""
    rows: list[ScheduledProcess] = []
    clock: int | None = None
    for process in sorted(processes, key=lambda p: p.arrival):
        start = process.arrival if clock is None else max(clock, process.arrival)
        clock = start + process.burst
        turnaround = clock - process.arrival
        rows.append(ScheduledProcess(process, clock, turnaround, turnaround - process.burst))
    return rows


def priority(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Run processes by ascending priority number, all present at time zero."""
    rows: list[ScheduledProcess] = []
    clock = 0
    for process in sorted(processes, key=lambda p: p.priority):
        waiting = clock
        clock += process.burst
        rows.append(ScheduledProcess(process, clock, clock, waiting))
    return rows


def round_robin(processes: Iterable[Process], time_slice: int) -> RoundRobinResult:
    """Preemptive round robin over processes given in arrival order.

    The scheduler moves to the next process once it has arrived and otherwise
    goes back to the first one; when every process so far is finished it waits
    for the next arrival.
    """
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is required")
    if time_slice < 1:
        raise ValueError("time slice must be at least 1")
    if any(p.burst < 1 for p in procs):
        raise ValueError("burst times must be at least 1")

    remaining = [p.burst for p in procs]
    left = len(procs)
    last = len(procs) - 1
    clock = 0
    total_waiting = 0
    total_turnaround = 0
    i = 0
    while left:
        process = procs[i]
        if remaining[i] > 0:
            run = min(remaining[i], time_slice)
            remaining[i] -= run
            clock += run
            if remaining[i] == 0:
                left -= 1
                turnaround = clock - process.arrival
                total_turnaround += turnaround
                total_waiting += turnaround - process.burst
        if i == last:
            i = 0
        elif procs[i + 1].arrival <= clock:
            i += 1
        elif not any(remaining[: i + 1]):
            clock = procs[i + 1].arrival
            i += 1
        else:
            i = 0
    return RoundRobinResult(total_waiting, total_turnaround, len(procs))
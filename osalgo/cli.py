"""Command-line front end for the scheduling and allocation algorithms."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from osalgo.cpu_scheduling import (
    Process,
    RoundRobinResult,
    ScheduledProcess,
    fcfs,
    priority,
    round_robin,
)
from osalgo.disk_scheduling import Direction, c_scan, scan
from osalgo.memory_allocation import Strategy, allocate
from osalgo.paging import PageStep, count_page_faults, fifo_page_replacement


def format_paging(steps: Sequence[PageStep]) -> str:
    """Render one line of frame contents per reference, then the fault total."""
    lines = []
    for step in steps:
        line = "".join(f"{-1 if frame is None else frame}\t" for frame in step.frames)
        if step.fault:
            line += f"\t PF NO: {step.fault_number} "
        lines.append(line)
    lines.append(f"Total number of page faults: {count_page_faults(steps)}")
    return "\n".join(lines) + "\n"


def format_allocation(process_sizes: Iterable[int], allocation: Iterable[int | None]) -> str:
    """Render the block given to each process, numbering both from one."""
    lines = [" Process number\t Process size\t Allocated block"]
    for number, (size, block) in enumerate(zip(process_sizes, allocation), start=1):
        placed = "Not allocated" if block is None else str(block + 1)
        lines.append(f"{number}\t\t{size}\t\t{placed}")
    return "\n".join(lines) + "\n"


def format_fcfs(rows: Iterable[ScheduledProcess]) -> str:
    """Render an FCFS schedule with arrival, burst, completion, turnaround and waiting times."""
    lines = ["PROCESS ID\tAT\tBT\tCT\tTAT\tWT"]
    for row in rows:
        p = row.process
        lines.append(
            f"{p.pid}\t\t{p.arrival}\t{p.burst}\t{row.completion}\t{row.turnaround}\t{row.waiting}"
        )
    return "\n".join(lines) + "\n"


def format_priority(rows: Iterable[ScheduledProcess]) -> str:
    """Render a priority schedule with burst, priority, waiting and turnaround times."""
    lines = [
        "PROCESS ID\tBURST TIME\tPRIORITY\tWAITING TIME\tTURNAROUND TIME",
        "__________\t_________\t_________\t_________\t_________",
    ]
    for row in rows:
        p = row.process
        lines.append(f"{p.pid}\t\t{p.burst}\t\t{p.priority}\t\t{row.waiting}\t\t{row.turnaround}")
    return "\n".join(lines) + "\n"


def format_round_robin(result: RoundRobinResult) -> str:
    """Render the totals and averages of a round-robin run."""
    return (
        f"Total waiting time: {result.total_waiting}\n"
        f"Total turnaround time: {result.total_turnaround}\n"
        f"Average waiting time: {result.average_waiting:.6f}\n"
        f"Average turnaround time: {result.average_turnaround:.6f}\n"
    )


def _int_tuple(count: int, fields: str) -> Callable[[str], tuple[int, ...]]:
    def parse(text: str) -> tuple[int, ...]:
        parts = text.split(",")
        try:
            values = tuple(int(part) for part in parts)
        except ValueError:
            values = ()
        if len(values) != count:
            raise argparse.ArgumentTypeError(f"expected {fields}, got {text!r}")
        return values

    return parse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osalgo", description="Classic operating-system algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fifo = commands.add_parser("fifo", help="FIFO page replacement")
    fifo.add_argument("--frames", type=int, required=True, help="number of frames")
    fifo.add_argument("pages", type=int, nargs="+", help="page reference string")

    for strategy in Strategy:
        fit = commands.add_parser(f"{strategy.value}-fit", help=f"{strategy.value}-fit allocation")
        fit.set_defaults(strategy=strategy)
        fit.add_argument("--processes", type=int, nargs="+", required=True, help="process sizes")
        fit.add_argument("--blocks", type=int, nargs="+", required=True, help="block sizes")

    for name in ("scan", "c-scan"):
        disk = commands.add_parser(name, help=f"{name.upper()} disk scheduling")
        disk.add_argument("--head", type=int, required=True, help="initial head position")
        disk.add_argument("--disk-size", type=int, required=True, help="number of cylinders")
        disk.add_argument(
            "--direction", choices=("high", "low"), default="high", help="initial direction"
        )
        disk.add_argument("requests", type=int, nargs="+", help="request sequence")

    first_come = commands.add_parser("fcfs", help="first come first served")
    first_come.add_argument(
        "processes", type=_int_tuple(3, "PID,ARRIVAL,BURST"), nargs="+", metavar="PID,ARRIVAL,BURST"
    )

    prio = commands.add_parser("priority", help="non-preemptive priority scheduling")
    prio.add_argument(
        "processes", type=_int_tuple(3, "PID,BURST,PRIORITY"), nargs="+", metavar="PID,BURST,PRIORITY"
    )

    rr = commands.add_parser("round-robin", help="round-robin scheduling")
    rr.add_argument("--slice", type=int, required=True, dest="time_slice", help="time slice")
    rr.add_argument(
        "processes", type=_int_tuple(2, "ARRIVAL,BURST"), nargs="+", metavar="ARRIVAL,BURST"
    )
    return parser


def _run(args: argparse.Namespace) -> str:
    command = args.command
    if command == "fifo":
        return format_paging(fifo_page_replacement(args.pages, args.frames))
    if command.endswith("-fit"):
        return format_allocation(args.processes, allocate(args.processes, args.blocks, args.strategy))
    if command in ("scan", "c-scan"):
        direction = Direction.HIGH if args.direction == "high" else Direction.LOW
        if command == "scan":
            total = scan(args.requests, args.head, args.disk_size, direction)
            return f"The total head movement is {total}\n"
        total = c_scan(args.requests, args.head, args.disk_size, direction)
        return f"Total head movement = {total}\n"
    if command == "fcfs":
        procs = [Process(pid, burst, arrival) for pid, arrival, burst in args.processes]
        return format_fcfs(fcfs(procs))
    if command == "priority":
        procs = [Process(pid, burst, priority=prio) for pid, burst, prio in args.processes]
        return format_priority(priority(procs))
    procs = [
        Process(number, burst, arrival)
        for number, (arrival, burst) in enumerate(args.processes, start=1)
    ]
    return format_round_robin(round_robin(procs, args.time_slice))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one algorithm chosen on the command line and print its report."""
    args = _build_parser().parse_args(argv)
    try:
        output = _run(args)
    except ValueError as error:
        print(f"osalgo: error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
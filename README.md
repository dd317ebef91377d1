# osalgo

Small, dependency-free implementations of the classic algorithms taught in
operating-systems courses. You can use them as a library or from the command
line.

## What is included

- **CPU scheduling** (`osalgo.cpu_scheduling`)
  - `fcfs(processes)` runs processes in order of arrival. If the CPU is idle
    when a process arrives late, it waits for that process. It returns one
    `ScheduledProcess` per process, with `completion`, `turnaround` and
    `waiting` times.
  - `priority(processes)` runs every process from time zero, lowest
    `priority` number first.
  - `round_robin(processes, time_slice)` runs the processes, given in
    arrival order, with preemption after each time slice. It returns a
    `RoundRobinResult` with `total_waiting`, `total_turnaround`,
    `average_waiting` and `average_turnaround`. It raises `ValueError` in
    three cases: the process list is empty, the slice is below 1, or a burst
    time is below 1.
  - Processes are described with `Process(pid, burst, arrival=0, priority=0)`.
- **Contiguous memory allocation** (`osalgo.memory_allocation`)
  - `first_fit`, `best_fit` and `worst_fit` take process sizes and block
    sizes. Each returns, for every process, the zero-based index of its block,
    or `None` if no block had room.
  - `allocate(process_sizes, block_sizes, strategy)` does the same with a
    `Strategy` (`FIRST`, `BEST`, `WORST`) or its string value.
  - A block's free space shrinks by each process placed in it. Ties go to the
    lowest index.
- **Page replacement** (`osalgo.paging`)
  - `fifo_page_replacement(reference, frames)` returns one `PageStep` per
    reference. Each step holds the frame contents (`None` for an empty frame),
    whether the reference faulted, and the running fault number.
  - `count_page_faults(steps)` totals the faults.
- **Disk scheduling** (`osalgo.disk_scheduling`)
  - `scan(requests, head, disk_size, direction)` and
    `c_scan(requests, head, disk_size, direction)` return the total head
    movement.
  - `direction` is a `Direction` (`LOW` = 0, `HIGH` = 1).
  - SCAN sweeps to the end of the disk, then reverses. C-SCAN sweeps to the
    end, jumps to the other end and keeps its direction. The jump counts as
    `disk_size - 1` cylinders.
  - A request at the head's own position counts as lying below it.
  - Cylinders outside `0 .. disk_size - 1` raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from osalgo.paging import fifo_page_replacement, count_page_faults
from osalgo.memory_allocation import best_fit
from osalgo.disk_scheduling import Direction, scan

steps = fifo_page_replacement([7, 0, 1, 2, 0, 3, 0, 4], 3)
print(count_page_faults(steps))

allocation = best_fit([212, 417, 112, 426], [100, 500, 200, 300, 600])

movement = scan([98, 183, 37, 122], head=53, disk_size=200, direction=Direction.HIGH)
```

## Command line

The `osalgo` command takes one sub-command per algorithm, with all input given
as arguments, and prints a table or a total:

```
osalgo fifo --frames 3 7 0 1 2 0 3 0 4
osalgo first-fit --processes 212 417 112 426 --blocks 100 500 200 300 600
osalgo best-fit  --processes 212 417 112 426 --blocks 100 500 200 300 600
osalgo worst-fit --processes 212 417 112 426 --blocks 100 500 200 300 600
osalgo scan   --head 53 --disk-size 200 --direction high 98 183 37 122
osalgo c-scan --head 53 --disk-size 200 --direction low  98 183 37 122
osalgo fcfs 1,0,5 2,2,3 3,4,1
osalgo priority 1,10,3 2,1,1 3,2,4
osalgo round-robin --slice 2 0,5 1,3 2,1
```

The process arguments are written as follows:

| Sub-command   | Form of each process    |
|---------------|-------------------------|
| `fcfs`        | `PID,ARRIVAL,BURST`     |
| `priority`    | `PID,BURST,PRIORITY`    |
| `round-robin` | `ARRIVAL,BURST`         |

The round-robin processes must be given in arrival order.

Output conventions:

- In the paging table, empty frames print as `-1`.
- In the allocation tables, blocks are numbered from 1.
- `--direction` defaults to `high`.

When the input is invalid, the command prints `osalgo: error: ...` to
standard error and exits with status 1. Examples of invalid input are a
request outside the disk, or no frames.

`osalgo --help` and `osalgo <sub-command> --help` list the options.

## What it does not do

The command does not prompt for input interactively and does not read input
from files. Everything is passed as command-line arguments.
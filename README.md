# coursealgos

Classic algorithms and data structures from data-structures,
algorithm-design and operating-systems courses, in plain Python with no
third-party dependencies.

## What is inside

- `coursealgos.sorting`: `add_binary` for equal-length bit lists (the result
  has one extra leading bit for the carry); `insertion_sort`, `merge_sort`,
  `selection_sort`, `shell_sort`, each returning a new ascending list;
  `selection_sort_passes`, which yields the list and the chosen minimum after
  every pass; a `MinHeap` with `push`, `pop`, `len()` and `items()`; and
  `heap_sort`, which returns the values in **descending** order.
- `coursealgos.linked_list`: `SinglyLinkedList` with `insert_start`,
  `insert_end` and `insert_at` (1-based position), iteration and `len()`.
- `coursealgos.stack`: a bounded `Stack` (capacity 100 by default) that
  raises `StackOverflowError` and `StackUnderflowError`, and
  `reverse_string`.
- `coursealgos.primes`: `is_prime`, `next_prime`, `prime_factors`,
  `count_distinct_prime_factors` and `distinct_prime_factor_counts`
  (which accepts between 1 and 1000 values).
- `coursealgos.trees`: linked binary trees (`TreeNode` with `set_left` /
  `set_right`, raising `TreeError` when a child already exists), `preorder`,
  `inorder`, `postorder`; array-backed trees `ArrayTree` and
  `LinkedArrayTree`; `balanced_tree_array`, which lays sorted values out as a
  balanced search tree in implicit-array form, and `array_preorder`,
  `array_inorder`, `array_postorder` to walk such arrays.
- `coursealgos.realtime`: `PeriodicTask`, `hyperperiod`, `cpu_utilization`,
  `edf_schedule` (one entry per time unit from 0 to the hyperperiod
  inclusive: the running task's index or `None` when idle),
  `rate_monotonic_bound` and `rate_monotonic_schedule` for two processes,
  which raises `NotSchedulableError` when the utilisation is too high.
- `coursealgos.scheduling`: `fcfs`, `sjf`, `priority_non_preemptive`,
  `hrrn`, `srtf` and `priority_preemptive`, each taking `Process` records and
  returning a `ScheduleResult` of `ScheduledProcess` entries, with totals,
  averages, CPU utilisation and throughput.
- `coursealgos.multilevel`: `round_robin`, `multilevel_queue` (round robin
  for interactive processes, first come first served for batch ones,
  returning a `MultilevelQueueResult`) and `multilevel_feedback_queue`
  (three levels, returning a `FeedbackResult` of `FeedbackEntry` records).
- `coursealgos.cli`: the command line, and `format_schedule`, which renders a
  `ScheduleResult` as a table of waiting and turnaround times.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from coursealgos.sorting import add_binary
from coursealgos.primes import count_distinct_prime_factors
from coursealgos.stack import reverse_string
from coursealgos.realtime import hyperperiod
from coursealgos.scheduling import Process, fcfs

add_binary([1, 0, 1, 0, 1], [1, 1, 0, 0, 1])   # [1, 0, 1, 1, 1, 0]
count_distinct_prime_factors(12)               # 2
reverse_string("hello")                        # "olleh"
hyperperiod([4, 6])                            # 12

result = fcfs([Process(pid=1, arrival=0, burst=5), Process(pid=2, arrival=1, burst=3)])
result.average_waiting()                       # 2.0
```

## Command line

The `coursealgos` command has three subcommands. Processes are given as
`ARRIVAL:BURST` and are numbered from 1 in the order given; periodic tasks
are given as `ARRIVAL:EXECUTION:DEADLINE:PERIOD`.

```
coursealgos fcfs 0:5 1:3 2:8
coursealgos rr --quantum 2 0:5 1:3 2:8
coursealgos edf 0:1:4:4 0:2:6:6
```

- `fcfs` prints the first come first served table with total and average
  waiting and turnaround times.
- `rr` prints start, completion, turnaround, waiting and response times for
  round robin, with averages, CPU utilisation and throughput.
- `edf` prints the CPU utilisation, whether the set can be scheduled, and
  which task runs (or `Idle`) at each time unit over one hyperperiod.

Invalid input (such as a non-positive burst or quantum) is reported on
standard error with exit status 1.

## What it does not do

The command line covers only `fcfs`, `rr` and `edf`. Shortest job first,
priority, HRRN, SRTF, the multilevel queues, rate monotonic scheduling and
the sorting, tree and prime functions are available from Python only. There
is no interactive prompting for input; everything is passed as arguments.
"""Round robin scheduling, a two-level queue (round robin over first come first
served) and a three-level feedback queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from coursealgos.scheduling import Process, ScheduledProcess, ScheduleResult, fcfs


def _positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive")


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Round robin with time slice ``quantum``; entries are ordered by pid.

    Processes join the ready queue in order of arrival. A process whose slice
    runs out goes back to the end of the queue after every process that
    arrived meanwhile.
    """
    _positive("quantum", quantum)
    order = sorted(processes, key=lambda process: process.arrival)
    if not order:
        raise ValueError("at least one process is needed")

    remaining = [process.burst for process in order]
    starts: dict[int, int] = {}
    finished: list[ScheduledProcess] = []
    queue: deque[int] = deque([0])
    queued = {0}
    time = 0

    while len(finished) < len(order):
        index = queue.popleft()
        process = order[index]
        if index not in starts:
            time = max(time, process.arrival)
            starts[index] = time

        ran = min(quantum, remaining[index])
        remaining[index] -= ran
        time += ran
        if remaining[index] == 0:
            finished.append(ScheduledProcess(process, starts[index], time))

        for other, candidate in enumerate(order):
            if other not in queued and remaining[other] > 0 and candidate.arrival <= time:
                queue.append(other)
                queued.add(other)
        if remaining[index] > 0:
            queue.append(index)

        if not queue:
            waiting = next(
                (other for other, left in enumerate(remaining) if left > 0 and other not in queued),
                None,
            )
            if waiting is not None:
                queue.append(waiting)
                queued.add(waiting)

    finished.sort(key=lambda entry: entry.pid)
    return ScheduleResult(tuple(finished))


@dataclass(frozen=True)
class MultilevelQueueResult:
    """Results of the two queues: round robin for interactive processes and
    first come first served for batch processes. An empty queue has no entries."""

    interactive: ScheduleResult
    batch: ScheduleResult


def multilevel_queue(
    interactive: Iterable[Process], batch: Iterable[Process], quantum: int
) -> MultilevelQueueResult:
    """Schedule interactive processes by round robin and batch processes by
    first come first served, each queue on its own from time 0."""
    _positive("quantum", quantum)
    interactive_list = list(interactive)
    batch_list = list(batch)
    if not interactive_list and not batch_list:
        raise ValueError("at least one process is needed")
    return MultilevelQueueResult(
        interactive=round_robin(interactive_list, quantum) if interactive_list else ScheduleResult(()),
        batch=fcfs(batch_list) if batch_list else ScheduleResult(()),
    )


@dataclass(frozen=True)
class FeedbackEntry:
    """A process as it finished in the feedback queue.

    ``queue`` is the level (1, 2 or 3) it finished in and ``burst`` the work
    it still had on entering that level.
    """

    pid: int
    queue: int
    burst: int
    waiting: int
    turnaround: int


@dataclass(frozen=True)
class FeedbackResult:
    """Entries in the order they finished, with totals and averages."""

    entries: tuple[FeedbackEntry, ...]
    total_waiting: int
    total_turnaround: int
    average_waiting: float
    average_turnaround: float


def _by_arrival(processes: list[Process]) -> list[Process]:
    result = list(processes)
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            if result[i].arrival > result[j].arrival:
                result[i], result[j] = result[j], result[i]
    return result


def multilevel_feedback_queue(
    processes: Iterable[Process], first_quantum: int, second_quantum: int
) -> FeedbackResult:
    """Three-level feedback queue: round robin with ``first_quantum``, then
    round robin with ``second_quantum``, then first come first served.

    Every process gets one slice in each round robin level; what is left over
    moves down a level. Time starts at the first arrival and runs without
    idling.
    """
    _positive("first_quantum", first_quantum)
    _positive("second_quantum", second_quantum)
    order = _by_arrival(list(processes))
    if not order:
        raise ValueError("at least one process is needed")

    entries: list[FeedbackEntry] = []
    second: list[tuple[Process, int]] = []
    time = order[0].arrival

    for process in order:
        if process.burst <= first_quantum:
            time += process.burst
            entries.append(
                FeedbackEntry(
                    pid=process.pid,
                    queue=1,
                    burst=process.burst,
                    waiting=time - process.arrival - process.burst,
                    turnaround=time - process.arrival,
                )
            )
        else:
            time += first_quantum
            second.append((process, process.burst - first_quantum))

    third: list[tuple[Process, int]] = []
    for process, burst in second:
        if burst <= second_quantum:
            time += burst
            entries.append(
                FeedbackEntry(
                    pid=process.pid,
                    queue=2,
                    burst=burst,
                    waiting=time - first_quantum - burst,
                    turnaround=time,
                )
            )
        else:
            time += second_quantum
            third.append((process, burst - second_quantum))

    completion = time - first_quantum - second_quantum
    for process, burst in third:
        completion += burst
        entries.append(
            FeedbackEntry(
                pid=process.pid,
                queue=3,
                burst=burst,
                waiting=completion - burst,
                turnaround=completion,
            )
        )

    total_waiting = sum(entry.waiting for entry in entries)
    total_turnaround = sum(entry.turnaround for entry in entries)
    return FeedbackResult(
        entries=tuple(entries),
        total_waiting=total_waiting,
        total_turnaround=total_turnaround,
        average_waiting=total_waiting / len(order),
        average_turnaround=total_turnaround / len(order),
    )
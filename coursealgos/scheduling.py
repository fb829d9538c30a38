"""Single-processor CPU scheduling: first come first served, shortest job first,
priority (with and without preemption), highest response ratio next and
shortest remaining time first."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Process:
    """A process that arrives at ``arrival`` and needs ``burst`` units of CPU."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError("arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError("burst time must be positive")


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with when it first ran and when it finished."""

    process: Process
    start: int
    completion: int

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival(self) -> int:
        return self.process.arrival

    @property
    def burst(self) -> int:
        return self.process.burst

    @property
    def priority(self) -> int:
        return self.process.priority

    @property
    def turnaround(self) -> int:
        """Completion time minus arrival time."""
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        """Turnaround time minus burst time."""
        return self.turnaround - self.burst

    @property
    def response(self) -> int:
        """Start time minus arrival time."""
        return self.start - self.arrival


@dataclass(frozen=True)
class ScheduleResult:
    """The outcome of a scheduling run, one entry per process."""

    entries: tuple[ScheduledProcess, ...]

    def __iter__(self) -> Iterator[ScheduledProcess]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def total_waiting(self) -> int:
        return sum(entry.waiting for entry in self.entries)

    def total_turnaround(self) -> int:
        return sum(entry.turnaround for entry in self.entries)

    def average_waiting(self) -> float:
        return self.total_waiting() / len(self.entries)

    def average_turnaround(self) -> float:
        return self.total_turnaround() / len(self.entries)

    def average_response(self) -> float:
        return sum(entry.response for entry in self.entries) / len(self.entries)

    def _makespan(self) -> int:
        return max(entry.completion for entry in self.entries)

    def cpu_utilization(self) -> float:
        """Percentage of the time from 0 to the last completion that the CPU was busy."""
        makespan = self._makespan()
        idle = makespan - sum(entry.burst for entry in self.entries)
        return (makespan - idle) / makespan * 100

    def throughput(self) -> float:
        """Processes completed per unit of time from the first arrival on."""
        first_arrival = min(entry.arrival for entry in self.entries)
        return len(self.entries) / (self._makespan() - first_arrival)


def _checked(processes: Iterable[Process]) -> list[Process]:
    items = list(processes)
    if not items:
        raise ValueError("at least one process is needed")
    return items


def _selection_sorted(
    items: Sequence[Process], before: Callable[[Process, Process], bool]
) -> list[Process]:
    """Selection sort by swapping, which fixes how equal keys end up ordered."""
    result = list(items)
    for i in range(len(result)):
        pos = i
        for j in range(i + 1, len(result)):
            if before(result[j], result[pos]):
                pos = j
        result[i], result[pos] = result[pos], result[i]
    return result


def _run_in_passes(order: Sequence[Process]) -> ScheduleResult:
    """Repeatedly sweep ``order``, running to completion every process that has
    arrived by the time the sweep reaches it."""
    done = [False] * len(order)
    entries: list[ScheduledProcess] = []
    time = 0
    while len(entries) < len(order):
        ran = False
        for index, process in enumerate(order):
            if not done[index] and process.arrival <= time:
                start = time
                time += process.burst
                entries.append(ScheduledProcess(process, start, time))
                done[index] = True
                ran = True
        if not ran:
            time = min(p.arrival for p, finished in zip(order, done) if not finished)
    return ScheduleResult(tuple(entries))


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come first served; entries are in completion order."""
    return _run_in_passes(_checked(processes))


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive shortest job first; entries are in completion order."""
    order = _selection_sorted(_checked(processes), lambda a, b: a.burst < b.burst)
    return _run_in_passes(order)


def priority_non_preemptive(
    processes: Iterable[Process], high_value_first: bool = False
) -> ScheduleResult:
    """Non-preemptive priority scheduling; entries are in completion order.

    With ``high_value_first`` a larger priority number means more urgent,
    otherwise a smaller one does.
    """
    if high_value_first:
        order = _selection_sorted(_checked(processes), lambda a, b: a.priority > b.priority)
    else:
        order = _selection_sorted(_checked(processes), lambda a, b: a.priority < b.priority)
    return _run_in_passes(order)


def hrrn(processes: Iterable[Process]) -> ScheduleResult:
    """Highest response ratio next; entries are in completion order.

    The response ratio is (burst + time waited) / burst; on equal ratios the
    process that arrived first wins.
    """
    order = _checked(processes)
    for i in range(len(order)):
        for j in range(i + 1, len(order)):
            if order[i].arrival > order[j].arrival:
                order[i], order[j] = order[j], order[i]

    pending = list(order)
    entries: list[ScheduledProcess] = []
    time = order[0].arrival
    while pending:
        arrived = [p for p in pending if p.arrival <= time]
        if not arrived:
            time = min(p.arrival for p in pending)
            continue
        chosen = arrived[0]
        best = Fraction(chosen.burst + time - chosen.arrival, chosen.burst)
        for candidate in arrived[1:]:
            ratio = Fraction(candidate.burst + time - candidate.arrival, candidate.burst)
            if ratio > best:
                chosen, best = candidate, ratio
        pending.remove(chosen)
        start = time
        time += chosen.burst
        entries.append(ScheduledProcess(chosen, start, time))
    return ScheduleResult(tuple(entries))


def _preemptive(
    order: Sequence[Process], rank: Callable[[int, int], tuple]
) -> dict[int, ScheduledProcess]:
    """Run one time unit at a time, each unit going to the ready process with
    the smallest ``rank(index, remaining)``; returns entries by index."""
    remaining = [process.burst for process in order]
    starts: dict[int, int] = {}
    finished: dict[int, ScheduledProcess] = {}
    time = 0
    while len(finished) < len(order):
        ready = [
            index
            for index, process in enumerate(order)
            if remaining[index] > 0 and process.arrival <= time
        ]
        if not ready:
            time = min(p.arrival for i, p in enumerate(order) if remaining[i] > 0)
            continue
        index = min(ready, key=lambda i: rank(i, remaining[i]))
        starts.setdefault(index, time)
        remaining[index] -= 1
        time += 1
        if remaining[index] == 0:
            finished[index] = ScheduledProcess(order[index], starts[index], time)
    return finished


def srtf(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining time first; entries are in completion order."""
    order = _checked(processes)
    finished = _preemptive(order, lambda index, left: (left, index))
    entries = sorted(finished.values(), key=lambda entry: entry.completion)
    return ScheduleResult(tuple(entries))


def priority_preemptive(
    processes: Iterable[Process], high_value_first: bool = False
) -> ScheduleResult:
    """Preemptive priority scheduling; entries keep the input order.

    Equal priorities go to the earlier arrival, then to the earlier process.
    """
    order = _checked(processes)
    sign = -1 if high_value_first else 1
    finished = _preemptive(
        order, lambda index, _left: (sign * order[index].priority, order[index].arrival, index)
    )
    return ScheduleResult(tuple(finished[index] for index in range(len(order))))
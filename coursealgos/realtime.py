"""Real-time scheduling of periodic tasks: earliest deadline first and rate
monotonic scheduling of two processes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

DEFAULT_HORIZON = 100


class NotSchedulableError(Exception):
    """Raised when a task set cannot be scheduled."""


@dataclass(frozen=True)
class PeriodicTask:
    """A task released every ``period`` time units from ``arrival`` on, needing
    ``execution`` units of work within ``deadline`` units of each release."""

    arrival: int
    execution: int
    deadline: int
    period: int

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError("arrival time must not be negative")
        if self.execution <= 0:
            raise ValueError("execution time must be positive")
        if self.deadline <= 0:
            raise ValueError("deadline must be positive")
        if self.period <= 0:
            raise ValueError("period must be positive")


def hyperperiod(periods: Iterable[int]) -> int:
    """Return the least common multiple of the periods (1 if there are none)."""
    return math.lcm(*periods)


def cpu_utilization(tasks: Iterable[PeriodicTask]) -> float:
    """Sum of execution time over deadline for every task."""
    return sum(task.execution / task.deadline for task in tasks)


@dataclass
class _TaskState:
    task: PeriodicTask
    abs_arrival: int
    abs_deadline: int
    remaining: int
    instance: int = 0
    alive: bool = False

    @classmethod
    def start(cls, task: PeriodicTask) -> _TaskState:
        return cls(
            task=task,
            abs_arrival=task.arrival,
            abs_deadline=task.arrival + task.deadline,
            remaining=task.execution,
        )

    def complete(self) -> None:
        self.instance += 1
        self.alive = False
        self.remaining = self.task.execution
        self.abs_arrival = self.task.arrival + self.instance * self.task.period
        self.abs_deadline = self.abs_arrival + self.task.deadline


def _earliest(states: list[_TaskState]) -> Optional[int]:
    ready = [(state.abs_deadline, index) for index, state in enumerate(states) if state.alive]
    return min(ready)[1] if ready else None


def edf_schedule(tasks: Iterable[PeriodicTask]) -> list[Optional[int]]:
    """Schedule the tasks by earliest absolute deadline over one hyperperiod.

    Returns one entry per time unit from 0 to the hyperperiod inclusive: the
    index of the task that runs in that unit, or None when the processor is
    idle. A task becomes ready only at the exact time of its next release.
    """
    task_list = list(tasks)
    states = [_TaskState.start(task) for task in task_list]
    horizon = hyperperiod(task.period for task in task_list)

    timeline: list[Optional[int]] = []
    active: Optional[int] = None
    for timer in range(horizon + 1):
        arrived = False
        for state in states:
            if state.abs_arrival == timer:
                state.alive = True
                arrived = True
        if arrived or not any(state.alive for state in states):
            active = _earliest(states)

        if active is None:
            timeline.append(None)
            continue

        state = states[active]
        state.remaining -= 1
        timeline.append(active)
        if state.remaining == 0:
            state.complete()
            active = _earliest(states)
    return timeline


def rate_monotonic_bound(count: int) -> float:
    """Utilization below which ``count`` tasks are always schedulable by rate."""
    if count < 1:
        raise ValueError("count must be at least 1")
    return count * (2 ** (1 / count) - 1)


def rate_monotonic_schedule(
    period_a: int,
    execution_a: int,
    period_b: int,
    execution_b: int,
    horizon: int = DEFAULT_HORIZON,
) -> list[tuple[int, str]]:
    """Simulate rate monotonic scheduling of processes A and B.

    Returns the scheduling events as (time, description) pairs for every time
    from 0 to ``horizon`` inclusive. Raises NotSchedulableError when the
    utilization exceeds 100% or the two-task bound.
    """
    for name, value in (
        ("period_a", period_a),
        ("execution_a", execution_a),
        ("period_b", period_b),
        ("execution_b", execution_b),
    ):
        if value <= 0:
            raise ValueError(f"{name} must be positive")
    if horizon < 0:
        raise ValueError("horizon must not be negative")

    utilization = execution_a / period_a + execution_b / period_b
    if utilization > 1:
        raise NotSchedulableError("utilization is greater than 100%; CPU cannot schedule these tasks")
    if utilization > rate_monotonic_bound(2):
        raise NotSchedulableError("CPU cannot schedule these tasks")

    events: list[tuple[int, str]] = []
    a = b = 0
    run_a = run_b = False
    done_a = done_b = 0

    for t in range(horizon + 1):
        def emit(message: str) -> None:
            events.append((t, message))

        if done_a == execution_a:
            done_a = execution_a + 1
            emit(f"process A{a} is done")
            if done_b < execution_b:
                emit(f"run process B{b}")
                run_b = True
            run_a = False

        if done_b == execution_b:
            done_b = execution_b + 1
            emit(f"process B{b} is done")
            if done_a < execution_a:
                emit(f"run process A{a}")
                run_a = True
            run_b = False

        release_a = t % period_a == 0
        release_b = t % period_b == 0

        if release_a and release_b:
            a += 1
            b += 1
            emit(f"process A{a} and process B{b} are generated together")
            if period_a <= period_b:
                emit(f"run process A{a} and suspend process B{b}")
                run_a, run_b = True, False
            else:
                emit(f"run process B{b} and suspend process A{a}")
                run_a, run_b = False, True
            done_a = done_b = 0

        if release_a and not release_b:
            a += 1
            emit(f"process A{a} is generated")
            done_a = 0
            if done_b < execution_b:
                if period_b > period_a:
                    emit(f"process B{b} was preempted by process A{a}")
                    emit(f"run process A{a}")
                    run_a, run_b = True, False
                else:
                    emit(f"process B{b} is moving forward")
            else:
                emit(f"process A{a} is run")
                run_a = True

        if release_b and not release_a:
            b += 1
            emit(f"process B{b} is generated")
            done_b = 0
            if done_a < execution_a:
                if period_b >= period_a:
                    emit(f"process A{a} is on run")
                else:
                    emit(f"process A{a} was preempted by process B{b}")
                    emit(f"process B{b} is to run")
                    run_a, run_b = False, True
            else:
                emit(f"process B{b} is on run")
                run_b = True

        if run_a:
            done_a += 1
        if run_b:
            done_b += 1

    return events
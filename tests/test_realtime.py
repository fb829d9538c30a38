import math

import pytest

from coursealgos.realtime import (
    NotSchedulableError,
    PeriodicTask,
    cpu_utilization,
    edf_schedule,
    hyperperiod,
    rate_monotonic_bound,
    rate_monotonic_schedule,
)


def _two_tasks():
    return [PeriodicTask(0, 1, 4, 4), PeriodicTask(0, 2, 6, 6)]


def test_hyperperiod_is_lcm():
    assert hyperperiod([4, 6]) == 12
    assert hyperperiod([20, 50]) == 100


def test_hyperperiod_of_nothing_is_one():
    assert hyperperiod([]) == 1


def test_hyperperiod_divisible_by_each_period():
    periods = [3, 7, 10, 14]
    result = hyperperiod(periods)
    assert all(result % p == 0 for p in periods)


def test_cpu_utilization_uses_deadlines():
    tasks = [PeriodicTask(0, 1, 4, 8), PeriodicTask(0, 2, 6, 12)]
    assert cpu_utilization(tasks) == pytest.approx(1 / 4 + 2 / 6)


@pytest.mark.parametrize(
    "args",
    [(-1, 1, 4, 4), (0, 0, 4, 4), (0, 1, 0, 4), (0, 1, 4, 0)],
)
def test_invalid_task_rejected(args):
    with pytest.raises(ValueError):
        PeriodicTask(*args)


def test_edf_timeline_length_covers_hyperperiod():
    timeline = edf_schedule(_two_tasks())
    assert len(timeline) == hyperperiod([4, 6]) + 1


def test_edf_timeline_worked_example():
    assert edf_schedule(_two_tasks()) == [0, 1, 1, None, 0, None, 1, 1, 0, None, None, None, 0]


def test_edf_runs_each_task_its_share():
    timeline = edf_schedule(_two_tasks())[:12]
    assert timeline.count(0) == (12 // 4) * 1
    assert timeline.count(1) == (12 // 6) * 2


def test_edf_earliest_deadline_runs_first():
    timeline = edf_schedule(_two_tasks())
    assert timeline[0] == 0


def test_edf_idle_before_first_arrival():
    timeline = edf_schedule([PeriodicTask(2, 1, 3, 5)])
    assert timeline[:2] == [None, None]
    assert timeline[2] == 0
    assert timeline.count(0) == 1


def test_edf_no_tasks_is_all_idle():
    assert edf_schedule([]) == [None, None]


def test_rate_monotonic_bound_two():
    assert rate_monotonic_bound(2) == pytest.approx(2 * (math.sqrt(2) - 1))


def test_rate_monotonic_bound_one_task():
    assert rate_monotonic_bound(1) == pytest.approx(1.0)


def test_rate_monotonic_bound_decreases_towards_ln2():
    bounds = [rate_monotonic_bound(n) for n in range(1, 20)]
    assert all(x > y for x, y in zip(bounds, bounds[1:]))
    assert all(b > math.log(2) for b in bounds)


def test_rate_monotonic_bound_needs_a_task():
    with pytest.raises(ValueError):
        rate_monotonic_bound(0)


def test_rate_monotonic_rejects_over_full_utilization():
    with pytest.raises(NotSchedulableError):
        rate_monotonic_schedule(10, 8, 10, 5)


def test_rate_monotonic_rejects_above_bound():
    with pytest.raises(NotSchedulableError):
        rate_monotonic_schedule(20, 10, 50, 25)


def test_rate_monotonic_rejects_bad_arguments():
    with pytest.raises(ValueError):
        rate_monotonic_schedule(0, 1, 5, 2)


def test_rate_monotonic_worked_example():
    events = rate_monotonic_schedule(4, 1, 5, 2, horizon=4)
    assert events == [
        (0, "process A1 and process B1 are generated together"),
        (0, "run process A1 and suspend process B1"),
        (1, "process A1 is done"),
        (1, "run process B1"),
        (3, "process B1 is done"),
        (4, "process A2 is generated"),
        (4, "process A2 is run"),
    ]


def test_rate_monotonic_events_ordered_within_horizon():
    events = rate_monotonic_schedule(4, 1, 5, 2, horizon=40)
    times = [t for t, _ in events]
    assert times == sorted(times)
    assert all(0 <= t <= 40 for t in times)


def test_rate_monotonic_generates_every_release():
    events = rate_monotonic_schedule(4, 1, 5, 2, horizon=40)
    messages = [m for _, m in events]
    a_releases = sum(1 for m in messages if m.startswith("process A") and "generated" in m)
    b_releases = sum(1 for m in messages if "process B" in m and "generated" in m)
    assert a_releases == 40 // 4 + 1
    assert b_releases == 40 // 5 + 1
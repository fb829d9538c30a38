"""Command line front end for the scheduling simulators."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from coursealgos.multilevel import round_robin
from coursealgos.realtime import PeriodicTask, cpu_utilization, edf_schedule
from coursealgos.scheduling import Process, ScheduleResult, fcfs

RULE = "=" * 40


def format_schedule(result: ScheduleResult) -> str:
    """Render a schedule as a table of waiting and turnaround times with totals."""
    if not len(result):
        raise ValueError("cannot format an empty schedule")
    lines = ["PID\tAT\tBT\tWT\tTAT"]
    lines.extend(
        f"P{entry.pid}\t{entry.arrival}\t{entry.burst}\t{entry.waiting}\t{entry.turnaround}"
        for entry in result
    )
    lines.append("")
    lines.append(
        f"Total waiting time = {result.total_waiting()}\t\tAvg = {result.average_waiting():f}"
    )
    lines.append(
        f"Total TAT time = {result.total_turnaround()}\t\tAvg = {result.average_turnaround():f}"
    )
    return "\n".join(lines)


def _format_round_robin(result: ScheduleResult) -> str:
    lines = ["#P\tAT\tBT\tST\tCT\tTAT\tWT\tRT"]
    lines.extend(
        "\t".join(
            str(value)
            for value in (
                entry.pid,
                entry.arrival,
                entry.burst,
                entry.start,
                entry.completion,
                entry.turnaround,
                entry.waiting,
                entry.response,
            )
        )
        for entry in result
    )
    lines.append("")
    lines.append(f"Average Turnaround Time = {result.average_turnaround():.2f}")
    lines.append(f"Average Waiting Time = {result.average_waiting():.2f}")
    lines.append(f"Average Response Time = {result.average_response():.2f}")
    lines.append(f"CPU Utilization = {result.cpu_utilization():.2f}%")
    lines.append(f"Throughput = {result.throughput():.2f} process/unit time")
    return "\n".join(lines)


def _int_fields(spec: str, count: int, shape: str) -> list[int]:
    parts = spec.split(":")
    if len(parts) != count:
        raise argparse.ArgumentTypeError(f"expected {shape}, got {spec!r}")
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in {spec!r}") from None


def _process_spec(spec: str) -> tuple[int, int]:
    arrival, burst = _int_fields(spec, 2, "ARRIVAL:BURST")
    return arrival, burst


def _task_spec(spec: str) -> tuple[int, int, int, int]:
    arrival, execution, deadline, period = _int_fields(
        spec, 4, "ARRIVAL:EXECUTION:DEADLINE:PERIOD"
    )
    return arrival, execution, deadline, period


def _processes(specs: Sequence[tuple[int, int]]) -> list[Process]:
    return [
        Process(pid=number, arrival=arrival, burst=burst)
        for number, (arrival, burst) in enumerate(specs, start=1)
    ]


def _run_fcfs(args: argparse.Namespace) -> str:
    result = fcfs(_processes(args.processes))
    return "\n".join(["    FCFS Scheduling Algorithm", "", format_schedule(result)])


def _run_round_robin(args: argparse.Namespace) -> str:
    result = round_robin(_processes(args.processes), args.quantum)
    return "\n".join(
        [RULE, "Round Robin Scheduling Algorithm", RULE, _format_round_robin(result)]
    )


def _run_edf(args: argparse.Namespace) -> str:
    tasks = [PeriodicTask(*spec) for spec in args.tasks]
    utilization = cpu_utilization(tasks)
    lines = [f"CPU Utilization {utilization:f}"]
    lines.append("Tasks can be scheduled" if utilization < 1 else "Schedule is not feasible")
    for timer, active in enumerate(edf_schedule(tasks)):
        lines.append(f"{timer}  Idle" if active is None else f"{timer}  Task {active + 1}")
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coursealgos", description="Simulate CPU scheduling algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    first_come = commands.add_parser("fcfs", help="first come first served")
    first_come.add_argument(
        "processes", nargs="+", type=_process_spec, metavar="ARRIVAL:BURST"
    )
    first_come.set_defaults(run=_run_fcfs)

    robin = commands.add_parser("rr", help="round robin")
    robin.add_argument("-q", "--quantum", type=int, required=True, help="time slice")
    robin.add_argument("processes", nargs="+", type=_process_spec, metavar="ARRIVAL:BURST")
    robin.set_defaults(run=_run_round_robin)

    deadline = commands.add_parser("edf", help="earliest deadline first")
    deadline.add_argument(
        "tasks", nargs="+", type=_task_spec, metavar="ARRIVAL:EXECUTION:DEADLINE:PERIOD"
    )
    deadline.set_defaults(run=_run_edf)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        output = args.run(args)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(output)
    return 0
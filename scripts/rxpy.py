#!/usr/bin/env python3
"""
Hanson vs RxPY Performance Comparison

Compares the operations both libraries share: creating publishers, publishing
to one subscriber, fanning one event out to many subscribers, and tearing
subscriptions down again. RxPY's Subject plays the role of an EventPublisher.

Usage:
    python scripts/rxpy.py
    python scripts/rxpy.py --only fanout
"""

import argparse
import sys
import time
from typing import Callable, Dict, List

sys.path.insert(0, ".")

from rich.console import Console
from rich.table import Table
from rx.subject import Subject

from hanson import Observable, ObservationManager

# Configuration
TIME_LIMIT_SECONDS = 1.0
STARTING_N = 10
SCALE_FACTOR = 1.5
MAX_N = 2_000_000


def hanson_creation(n: int) -> float:
    start = time.perf_counter()
    [Observable(i) for i in range(n)]
    return time.perf_counter() - start


def rxpy_creation(n: int) -> float:
    start = time.perf_counter()
    [Subject() for _ in range(n)]
    return time.perf_counter() - start


def hanson_updates(n: int) -> float:
    observable = Observable(0)
    observable.add_event_handler(lambda change: None)

    start = time.perf_counter()
    for i in range(n):
        observable.value = i
    return time.perf_counter() - start


def rxpy_updates(n: int) -> float:
    subject = Subject()
    subject.subscribe(lambda value: None)

    start = time.perf_counter()
    for i in range(n):
        subject.on_next(i)
    return time.perf_counter() - start


def hanson_fanout(n: int) -> float:
    observable = Observable(0)
    for _ in range(n):
        observable.add_event_handler(lambda change: None)

    start = time.perf_counter()
    observable.value = 1
    return time.perf_counter() - start


def rxpy_fanout(n: int) -> float:
    subject = Subject()
    for _ in range(n):
        subject.subscribe(lambda value: None)

    start = time.perf_counter()
    subject.on_next(1)
    return time.perf_counter() - start


def hanson_teardown(n: int) -> float:
    manager = ObservationManager()
    observable = Observable(0)
    for _ in range(n):
        manager.observe(observable, lambda change: None)

    start = time.perf_counter()
    manager.unobserve_all()
    return time.perf_counter() - start


def rxpy_teardown(n: int) -> float:
    subject = Subject()
    disposables = [subject.subscribe(lambda value: None) for _ in range(n)]

    start = time.perf_counter()
    for disposable in disposables:
        disposable.dispose()
    return time.perf_counter() - start


BENCHMARKS: Dict[str, List[Callable[[int], float]]] = {
    "creation": [hanson_creation, rxpy_creation],
    "updates": [hanson_updates, rxpy_updates],
    "fanout": [hanson_fanout, rxpy_fanout],
    "teardown": [hanson_teardown, rxpy_teardown],
}


def run_adaptive(operation: Callable[[int], float]) -> Dict[str, float]:
    """Scale the workload until one run reaches the time limit."""
    n = STARTING_N
    while True:
        elapsed = max(operation(n), 1e-9)
        if elapsed >= TIME_LIMIT_SECONDS or n >= MAX_N:
            return {"max_n": n, "operations_per_second": n / elapsed}
        n = int(n * SCALE_FACTOR) + 1


def main():
    parser = argparse.ArgumentParser(description="Hanson vs RxPY comparison")
    parser.add_argument(
        "--only", choices=sorted(BENCHMARKS), help="Run a single benchmark"
    )
    args = parser.parse_args()

    console = Console()
    names = [args.only] if args.only else list(BENCHMARKS)

    table = Table(title="Hanson vs RxPY")
    table.add_column("Benchmark", style="cyan", no_wrap=True)
    table.add_column("Hanson", style="green", justify="right")
    table.add_column("RxPY", style="magenta", justify="right")
    table.add_column("Ratio", style="yellow", justify="right")

    for name in names:
        hanson_operation, rxpy_operation = BENCHMARKS[name]
        console.print(f"[yellow]Running {name}...[/yellow]")

        hanson_result = run_adaptive(hanson_operation)
        rxpy_result = run_adaptive(rxpy_operation)
        ratio = hanson_result["operations_per_second"] / rxpy_result["operations_per_second"]

        table.add_row(
            name,
            f"{hanson_result['operations_per_second']:,.0f} ops/sec",
            f"{rxpy_result['operations_per_second']:,.0f} ops/sec",
            f"{ratio:.2f}x",
        )

    console.print()
    console.print(table)


if __name__ == "__main__":
    main()

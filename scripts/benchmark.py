#!/usr/bin/env python3
"""
Hanson Performance Benchmarks

Measures the cost of the core operations of the library and prints the
results with rich formatting. Each benchmark scales its workload until one run
takes longer than TIME_LIMIT_SECONDS.

Usage:
    python scripts/benchmark.py            # Run all benchmarks
    python scripts/benchmark.py --config   # Show current benchmark configuration
    python scripts/benchmark.py --quiet    # Only show the final table

Configuration:
    Adjust the constants at the top of the file to change benchmark parameters.
"""

import argparse
import sys
import threading
import time
from typing import Any, Callable, Dict

# Add the project root to the Python path
sys.path.insert(0, ".")

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from hanson import Observable, ObservationManager, ThreadAffinityScheduler

# Configuration constants - adjust these to change benchmark behavior
TIME_LIMIT_SECONDS = 1.0  # Maximum time allowed per run
STARTING_N = 10  # Starting workload size
SCALE_FACTOR = 1.5  # How much to multiply N by each iteration


class HansonBenchmark:
    """Rich-formatted runner for Hanson performance benchmarks."""

    def __init__(self, quiet: bool = False):
        self.console = Console()
        self.quiet = quiet
        self.results: Dict[str, Dict[str, Any]] = {}

    def run_benchmarks(self):
        """Run all benchmarks and display the results."""
        start_time = time.time()

        self._display_header()

        self._run("publish", "Publish to N Handlers", self._publish_fanout)
        self._run("update", "Observable Writes", self._observable_writes)
        self._run("bind", "Binding Chain", self._binding_chain)
        self._run("teardown", "Manager Teardown", self._manager_teardown)
        self._run("affinity", "Cross-thread Delivery", self._cross_thread_delivery)

        self._display_final_results(start_time)

    @staticmethod
    def _publish_fanout(n: int) -> float:
        observable = Observable(0)
        received = []
        for _ in range(n):
            observable.add_event_handler(received.append)

        start_time = time.perf_counter()
        observable.value = 1
        elapsed = time.perf_counter() - start_time

        assert len(received) == n
        return elapsed

    @staticmethod
    def _observable_writes(n: int) -> float:
        observable = Observable(0)
        observable.add_event_handler(lambda change: None)

        start_time = time.perf_counter()
        for i in range(n):
            observable.value = i
        return time.perf_counter() - start_time

    @staticmethod
    def _binding_chain(n: int) -> float:
        manager = ObservationManager()
        base = Observable(0)
        current = base
        for _ in range(n):
            following = Observable(0)
            manager.bind(current, following)
            current = following

        start_time = time.perf_counter()
        base.value = 1
        elapsed = time.perf_counter() - start_time

        assert current.value == 1
        manager.unobserve_all()
        return elapsed

    @staticmethod
    def _manager_teardown(n: int) -> float:
        manager = ObservationManager()
        observables = [Observable(i) for i in range(n)]
        for observable in observables:
            manager.observe(observable, lambda change: None)

        start_time = time.perf_counter()
        manager.unobserve_all()
        elapsed = time.perf_counter() - start_time

        assert not any(o.has_event_handlers for o in observables)
        return elapsed

    @staticmethod
    def _cross_thread_delivery(n: int) -> float:
        scheduler = ThreadAffinityScheduler()
        observable = Observable(0)
        received = []
        observable.add_event_handler(received.append, scheduler)

        def write_all():
            for i in range(n):
                observable.value = i

        start_time = time.perf_counter()
        worker = threading.Thread(target=write_all)
        worker.start()
        worker.join()
        scheduler.run_pending()
        elapsed = time.perf_counter() - start_time

        assert len(received) == n
        return elapsed

    def _run(self, key: str, name: str, operation: Callable[[int], float]):
        if not self.quiet:
            self.console.print(f"[yellow]Running {name} benchmark...[/yellow]")

        result = self._run_adaptive_benchmark(operation)
        self.results[key] = dict(result, name=name)

        if not self.quiet:
            self.console.print(
                f"[green]✓[/green] {name}: {result['operations_per_second']:,.0f} ops/sec "
                f"({result['max_n']:,} items)"
            )

    def _run_adaptive_benchmark(self, operation: Callable[[int], float]) -> Dict[str, Any]:
        """Scale the workload until one run reaches the time limit."""
        n = STARTING_N

        while True:
            operation_time = max(operation(n), 1e-9)
            result = {
                "max_n": n,
                "operation_time": operation_time,
                "operations_per_second": n / operation_time,
            }

            if operation_time >= TIME_LIMIT_SECONDS or n >= 2_000_000:
                return result

            n = int(n * SCALE_FACTOR) + 1

    def _display_header(self):
        header = Panel(
            Align.center("Hanson Performance Benchmark Suite"),
            title="Hanson Benchmarks",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_final_results(self, start_time: float):
        elapsed = time.time() - start_time

        table = Table(title="Benchmark Results")
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Max Workload", style="magenta", justify="right")
        table.add_column("Performance", style="green", justify="right")
        table.add_column("Per Item", style="yellow", justify="right")

        for result in self.results.values():
            latency_us = result["operation_time"] / result["max_n"] * 1e6
            table.add_row(
                result["name"],
                f"{result['max_n']:,}",
                f"{result['operations_per_second'] / 1000:.1f}K ops/sec",
                f"{latency_us:.2f}μs",
            )

        self.console.print()
        self.console.print(table)
        self.console.print()
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def print_config():
    """Print the current benchmark configuration."""
    print("Hanson Benchmark Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {TIME_LIMIT_SECONDS}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="Hanson Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )

    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    HansonBenchmark(quiet=args.quiet).run_benchmarks()


if __name__ == "__main__":
    main()

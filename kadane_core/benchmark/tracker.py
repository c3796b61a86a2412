"""
Performance tracking for benchmark runs.

Keeps an append-only, in-memory log of BenchmarkRecord entries and
renders it as console summaries, per-size comparisons, or CSV files.

Usage:
    tracker = PerformanceTracker(results_dir=Path("results"))
    elapsed = measure_execution_time(lambda: find_max_subarray(data))
    tracker.record("Standard", len(data), elapsed, result.metrics, result.max_sum)
    tracker.export_to_csv_with_timestamp()
"""

import csv
import logging
import time
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from kadane_core.metrics.counters import MetricsSnapshot
from kadane_core.proto.benchmark_record import BenchmarkRecord, CSV_HEADER

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_DIR = Path("results")


def measure_execution_time(algorithm: Callable[[], object], repeats: int = 1) -> int:
    """
    Time a callable with the wall clock.

    Each sample is the delta around a single invocation; with several
    repeats the fastest sample is returned.

    Args:
        algorithm: Zero-argument callable to time
        repeats: Number of invocations (>= 1)

    Returns:
        Elapsed nanoseconds of the fastest invocation
    """
    if repeats < 1:
        raise ValueError(f"Repeats must be at least 1: {repeats}")

    best = None
    for _ in range(repeats):
        start = time.perf_counter_ns()
        algorithm()
        elapsed = time.perf_counter_ns() - start
        if best is None or elapsed < best:
            best = elapsed
    return best


class PerformanceTracker:
    """Append-only results log with reporting and CSV export."""

    def __init__(self, results_dir: Optional[Union[str, Path]] = None):
        """
        Initialize tracker.

        Args:
            results_dir: Directory for CSV exports; created on first export
        """
        self.results_dir = Path(results_dir) if results_dir else DEFAULT_RESULTS_DIR
        self._results: List[BenchmarkRecord] = []

    def add_result(self, record: BenchmarkRecord):
        self._results.append(record)

    def record(
        self,
        algorithm_name: str,
        array_size: int,
        execution_time_ns: int,
        metrics: MetricsSnapshot,
        result: int,
    ) -> BenchmarkRecord:
        """
        Build a BenchmarkRecord and append it to the log.

        Returns:
            The stored record
        """
        entry = BenchmarkRecord(
            algorithm_name=algorithm_name,
            array_size=array_size,
            execution_time_ns=execution_time_ns,
            metrics=metrics,
            result=result,
        )
        self._results.append(entry)
        logger.debug(f"Recorded {entry}")
        return entry

    def get_results(self) -> List[BenchmarkRecord]:
        """Copy of all records in insertion order."""
        return list(self._results)

    def get_results_for_algorithm(self, algorithm_name: str) -> List[BenchmarkRecord]:
        return [r for r in self._results if r.algorithm_name == algorithm_name]

    def clear_results(self):
        self._results.clear()

    def export_to_csv(self, filename: str) -> Path:
        """
        Write all records to a CSV file inside results_dir.

        Args:
            filename: File name relative to results_dir

        Returns:
            Path of the written file

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.results_dir.mkdir(parents=True, exist_ok=True)
        path = self.results_dir / filename

        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for entry in self._results:
                writer.writerow(entry.to_csv_row())

        logger.info(f"Exported {len(self._results)} results to {path}")
        print(f"Results exported to: {path}")
        return path

    def export_to_csv_with_timestamp(self) -> Path:
        stamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        return self.export_to_csv(f"benchmark_results_{stamp}.csv")

    def format_summary(self) -> str:
        if not self._results:
            return "No benchmark results available."
        return "\n".join(str(r) for r in self._results)

    def print_summary(self):
        print(self.format_summary())

    def format_comparison(self) -> str:
        """
        Group records by array size and compare execution times.

        Each line shows a run's time and its slowdown relative to the
        fastest run of the same size (the fastest reads 1.00x).

        Returns:
            Formatted report string
        """
        if len(self._results) < 2:
            return "Need at least 2 results for comparison."

        by_size: Dict[int, List[BenchmarkRecord]] = defaultdict(list)
        for entry in self._results:
            by_size[entry.array_size].append(entry)

        lines = []
        for size in sorted(by_size):
            group = by_size[size]
            if len(group) < 2:
                continue

            fastest = min(group, key=lambda r: r.execution_time_ns)
            lines.append(f"\nArray size: {size}")
            for entry in group:
                if entry is fastest or fastest.execution_time_ns == 0:
                    ratio = 1.0
                else:
                    ratio = entry.execution_time_ns / fastest.execution_time_ns
                lines.append(f"  {entry.algorithm_name}: "
                             f"{entry.execution_time_ms:.3f} ms ({ratio:.2f}x)")

        return "\n".join(lines)

    def print_comparison(self):
        print(self.format_comparison())

"""
Benchmark Record Schema.

One timed algorithm run as stored in the results log and exported to CSV.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from kadane_core.metrics.counters import MetricsSnapshot

CSV_HEADER = [
    "Algorithm",
    "ArraySize",
    "ExecutionTimeMs",
    "ExecutionTimeMicros",
    "Comparisons",
    "ArrayAccesses",
    "MemoryAllocations",
    "Assignments",
    "Result",
    "Timestamp",
]


def _local_timestamp() -> str:
    return datetime.now().isoformat()


@dataclass(frozen=True)
class BenchmarkRecord:
    """
    A single recorded benchmark run.

    Attributes:
        algorithm_name: Display name of the algorithm variant
        array_size: Length of the input sequence
        execution_time_ns: Wall-clock duration in nanoseconds
        metrics: Operation counts of the run
        result: Max sum returned by the run
        timestamp: ISO-8601 local date-time when the record was created
    """

    algorithm_name: str
    array_size: int
    execution_time_ns: int
    metrics: MetricsSnapshot
    result: int
    timestamp: str = field(default_factory=_local_timestamp)

    def __post_init__(self):
        """Validate record."""
        if self.array_size < 1:
            raise ValueError(f"Array size must be positive: {self.array_size}")

        if self.execution_time_ns < 0:
            raise ValueError(f"Execution time cannot be negative: {self.execution_time_ns}")

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time_ns / 1_000_000.0

    @property
    def execution_time_micros(self) -> float:
        return self.execution_time_ns / 1_000.0

    def to_csv_row(self) -> List[str]:
        """
        Encode the record as CSV fields in CSV_HEADER order.

        Returns:
            List of string fields; times use three decimals
        """
        return [
            self.algorithm_name,
            str(self.array_size),
            f"{self.execution_time_ms:.3f}",
            f"{self.execution_time_micros:.3f}",
            str(self.metrics.comparisons),
            str(self.metrics.array_accesses),
            str(self.metrics.memory_allocations),
            str(self.metrics.assignments),
            str(self.result),
            self.timestamp,
        ]

    def __str__(self) -> str:
        return (f"{self.algorithm_name} (size={self.array_size}): {self.result} result, "
                f"{self.execution_time_ms:.3f} ms, {self.metrics}")

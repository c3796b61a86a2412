"""
Operation counters for instrumented algorithm runs.

Tracks four primitive operation categories:
- Comparisons (loop bounds, branch conditions)
- Array accesses (reads of input elements)
- Memory allocations (objects created by the algorithm)
- Assignments (writes to local variables)

One OperationMetrics instance belongs to exactly one algorithm run and is
passed explicitly; there is no shared collector.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class MetricsSnapshot:
    """Immutable copy of operation counts taken at the end of a run."""

    comparisons: int = 0
    array_accesses: int = 0
    memory_allocations: int = 0
    assignments: int = 0

    def total_operations(self) -> int:
        """Sum of all four categories."""
        return (self.comparisons + self.array_accesses
                + self.memory_allocations + self.assignments)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def __str__(self) -> str:
        return (f"Metrics[comparisons={self.comparisons}, "
                f"arrayAccesses={self.array_accesses}, "
                f"memoryAllocations={self.memory_allocations}, "
                f"assignments={self.assignments}]")


class OperationMetrics:
    """
    Mutable tally of primitive operations for a single algorithm run.

    Usage:
        metrics = OperationMetrics()
        metrics.increment_memory_allocations()
        metrics.increment_array_accesses()

        snapshot = metrics.snapshot()
        print(f"Total operations: {snapshot.total_operations()}")
    """

    def __init__(self):
        """Initialize all counters to zero."""
        self.comparisons = 0
        self.array_accesses = 0
        self.memory_allocations = 0
        self.assignments = 0

    def increment_comparisons(self, count: int = 1):
        self.comparisons += count

    def increment_array_accesses(self, count: int = 1):
        self.array_accesses += count

    def increment_memory_allocations(self, count: int = 1):
        self.memory_allocations += count

    def increment_assignments(self, count: int = 1):
        self.assignments += count

    def reset(self):
        """Reset all counters (only needed when an instance is reused)."""
        self.comparisons = 0
        self.array_accesses = 0
        self.memory_allocations = 0
        self.assignments = 0

    def copy(self) -> "OperationMetrics":
        """
        Create an independent copy with identical counts.

        Returns:
            New OperationMetrics; later increments on either side do not
            affect the other.
        """
        duplicate = OperationMetrics()
        duplicate.comparisons = self.comparisons
        duplicate.array_accesses = self.array_accesses
        duplicate.memory_allocations = self.memory_allocations
        duplicate.assignments = self.assignments
        return duplicate

    def snapshot(self) -> MetricsSnapshot:
        """
        Get an immutable snapshot of current counts.

        Returns:
            MetricsSnapshot with the four counter values
        """
        return MetricsSnapshot(
            comparisons=self.comparisons,
            array_accesses=self.array_accesses,
            memory_allocations=self.memory_allocations,
            assignments=self.assignments,
        )

    def __str__(self) -> str:
        return str(self.snapshot())

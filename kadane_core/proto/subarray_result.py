"""
Max-Subarray Result Schema.

Defines the outcome of one maximum-subarray computation: the best sum,
its inclusive index range and the operation counts of the run.
"""

from dataclasses import dataclass

from kadane_core.metrics.counters import MetricsSnapshot


@dataclass(frozen=True)
class SubarrayResult:
    """
    Result of a single max-subarray invocation.

    Attributes:
        max_sum: Largest contiguous sum found
        start_index: First index of the winning range (inclusive, zero-based)
        end_index: Last index of the winning range (inclusive, zero-based)
        metrics: Operation counts recorded during the run

    Notes:
        - 0 <= start_index <= end_index < len(input)
        - Ties keep the earliest range found
    """

    max_sum: int
    start_index: int
    end_index: int
    metrics: MetricsSnapshot

    def __post_init__(self):
        """Validate index range."""
        if self.start_index < 0:
            raise ValueError(f"Start index cannot be negative: {self.start_index}")

        if self.end_index < self.start_index:
            raise ValueError(
                f"End index {self.end_index} precedes start index {self.start_index}"
            )

    @property
    def length(self) -> int:
        """Number of elements in the winning range."""
        return self.end_index - self.start_index + 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'max_sum': self.max_sum,
            'start_index': self.start_index,
            'end_index': self.end_index,
            'metrics': self.metrics.to_dict(),
        }

    def __str__(self) -> str:
        return (f"Max Sum: {self.max_sum}, "
                f"Range: [{self.start_index}, {self.end_index}], {self.metrics}")

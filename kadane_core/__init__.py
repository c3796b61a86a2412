"""
Kadane Core Package.

Instrumented maximum-sum contiguous subarray with a benchmarking harness.

Package structure:
- metrics: Operation counters and immutable snapshots
- proto: Result and benchmark record schemas
- algorithms: Standard (instrumented) and optimized Kadane variants
- benchmark: Timing, results log, CSV export, interactive runner
"""

__version__ = "0.1.0"

from .algorithms import InvalidArgumentError, find_max_subarray, find_max_subarray_optimized, validate_input
from .metrics import MetricsSnapshot, OperationMetrics
from .proto import SubarrayResult

__all__ = [
    'InvalidArgumentError',
    'find_max_subarray',
    'find_max_subarray_optimized',
    'validate_input',
    'MetricsSnapshot',
    'OperationMetrics',
    'SubarrayResult',
]

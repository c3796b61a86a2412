"""
Metrics Module: operation counters for instrumented algorithm runs.

Usage:
    from kadane_core.metrics import OperationMetrics

    metrics = OperationMetrics()
    metrics.increment_comparisons()
    snapshot = metrics.snapshot()
"""

from .counters import MetricsSnapshot, OperationMetrics

__all__ = ['MetricsSnapshot', 'OperationMetrics']
